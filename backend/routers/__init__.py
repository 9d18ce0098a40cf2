# backend/routers/__init__.py

from .songs import router as songs_router
from .stats import router as stats_router
from .visuals import router as visuals_router
from .upload import router as upload_router
