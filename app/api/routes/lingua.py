"""Lingua routes.

Expose the bundle negotiated for the current request and the locales the
resource store knows about.
"""

from fastapi import APIRouter

from infrastructure.services import LinguaDep, ResourceStoreDep

router = APIRouter(prefix="/lingua", tags=["Lingua"])


@router.get("")
def get_lingua(bundle: LinguaDep):
    """Return the locale and content resolved for this request."""
    return {"locale": bundle.locale, "content": bundle.content}


@router.get("/locales")
def get_locales(store: ResourceStoreDep):
    """List the available locales and the default one."""
    return {
        "default_locale": store.default_locale,
        "locales": store.locales,
    }
