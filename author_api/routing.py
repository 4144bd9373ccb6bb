import os
import pkgutil
from importlib import import_module

from fastapi import APIRouter

from author_api.logging import logger

# Track registered modules so repeated app construction logs once
_registered_http_modules: set[str] = set()


def collect_subrouters() -> APIRouter:
    """
    Collects and registers all HTTP routers of the application.

    Every module in `api/http` must expose a module-level `router`; each one
    is imported and included into the returned main router.

    Returns:
        APIRouter including every discovered router.
    """
    main_router: APIRouter = APIRouter()

    app_dir = os.path.dirname(__file__)
    app_name = os.path.basename(app_dir)

    for _, module, _ in pkgutil.iter_modules([f"{app_dir}/api/http"]):
        api = import_module(f".{module}", package=f"{app_name}.api.http")

        main_router.include_router(api.router)

        if module not in _registered_http_modules:
            logger.info(f'Register "{module}" api')
            _registered_http_modules.add(module)

    return main_router
