from fastapi import APIRouter

from webanalyzer.services.accessibility_cache import AccessibilityCache


def create_systems_router(container_env: dict, accessibility_cache: AccessibilityCache):
    """Create systems router exposing health, effective settings and the link cache."""
    router = APIRouter(prefix="/systems", tags=["System"])

    @router.get("/health")
    def health():
        return {"status": "ok"}

    @router.get("/config")
    def get_config():
        return {
            "environment": {
                key: str(value) if value is not None else None
                for key, value in container_env.items()
            }
        }

    @router.get("/link-cache")
    def link_cache_stats():
        return {"entries": len(accessibility_cache)}

    @router.delete("/link-cache")
    def clear_link_cache():
        """Drop every memoized accessibility decision."""
        cleared = len(accessibility_cache)
        accessibility_cache.clear()
        return {"cleared": cleared}

    return router
