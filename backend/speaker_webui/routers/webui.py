"""Web UI asset routes: the index page, its stylesheet and its script.

Every route goes through ``respond``, which resolves the asset in the bundle,
reads it as UTF-8 and answers 200, 404 or 500 with a body in the asset's own
comment or markup syntax.
"""

import logging

from fastapi import APIRouter, Depends, Response

from speaker_webui.assets import ASSETS, Asset, AssetBundle, AssetKind, get_bundle

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Web UI"])


def _asset_response(
    body: str, kind: AssetKind, status_code: int = 200, headers: dict[str, str] | None = None
) -> Response:
    # Explicit header: Starlette would otherwise append a charset to text/* types
    return Response(
        content=body,
        status_code=status_code,
        headers={"Content-Type": kind.media_type, **(headers or {})},
    )


def respond(asset: Asset, bundle: AssetBundle) -> Response:
    """Serve one asset from the bundle."""
    kind = asset.kind

    if not bundle.exists(asset.resource):
        logger.warning(f"Asset not found in bundle: {asset.resource}")
        return _asset_response(
            kind.placeholder(f"File not found: {asset.resource}"), kind, status_code=404
        )

    try:
        with bundle.open(asset.resource) as stream:
            content = stream.read().decode("utf-8")
    except Exception as e:
        logger.error(f"Failed to read asset {asset.resource}: {e}", exc_info=True)
        return _asset_response(
            kind.placeholder(f"Error reading file: {e}"), kind, status_code=500
        )

    logger.debug(f"Served {asset.resource} ({len(content)} chars)")
    return _asset_response(content, kind, headers={"Cache-Control": "no-cache"})


def _asset_endpoint(asset: Asset):
    # Plain def: FastAPI runs it in the threadpool, off the event loop
    def endpoint(bundle: AssetBundle = Depends(get_bundle)) -> Response:
        return respond(asset, bundle)

    endpoint.__name__ = f"get_{asset.name}"
    endpoint.__doc__ = f"Serve the bundled {asset.resource}."
    return endpoint


for _asset in ASSETS:
    for _path in _asset.routes:
        router.add_api_route(
            _path,
            _asset_endpoint(_asset),
            methods=["GET"],
            response_class=Response,
            include_in_schema=False,
        )
