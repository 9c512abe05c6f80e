from flask import Blueprint, current_app, request

from snippetbox.navigation import mark_active_links

bp = Blueprint('routes', __name__)


@bp.app_context_processor
def inject_page_furniture():
    """Navigation with the current page marked live, flash timings."""
    return {
        "nav_links": mark_active_links(request.path, current_app.config.get("NAV_LINKS", ())),
        "flash_fade_delay_ms": current_app.config.get("FLASH_FADE_DELAY_MS", 5000),
        "flash_remove_delay_ms": current_app.config.get("FLASH_REMOVE_DELAY_MS", 500),
    }

# imports at the end so that bp already exists
from snippetbox.routes import auth, comments  # noqa: E402,F401
