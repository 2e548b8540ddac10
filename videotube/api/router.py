from videotube.api.health import healthcheck
from videotube.api.video import listing, detail, publish  # noqa: F401  (register routes on router_video)
from videotube.api.comment import listing as comment_listing


def add_router(application):
    application.include_router(healthcheck.router)

    application.include_router(listing.router)
    application.include_router(comment_listing.router)
