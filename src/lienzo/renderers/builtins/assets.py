"""Asset renderer for embedded media.

Images become <img src alt />, everything else becomes a download link
labelled with the asset title:

    Asset("Logo", AssetFile("//cdn/logo.png", "image/png"))
    -> <img src="//cdn/logo.png" alt="Logo" />

    Asset("Manual", AssetFile("//cdn/manual.pdf", "application/pdf"))
    -> <a href="//cdn/manual.pdf">Manual</a>

Block nodes are handled when their target is an Asset or an EntityReference
with link_type "Asset". References are turned into assets by
RenderConfig.asset_resolver; resolution itself belongs to the caller. With
no resolver configured, or a resolver returning None, the block is dropped.
References to other entity types (entries and the like) are left for caller
renderers.
"""

from __future__ import annotations

from lienzo.config import get_render_config
from lienzo.errors import MalformedNodeError
from lienzo.nodes import Asset, Block, EntityReference, Node
from lienzo.renderers.builtins.base import interpolate
from lienzo.renderers.protocol import DEFAULT_PRIORITY
from lienzo.utils.logger import get_logger

logger = get_logger(__name__)


def is_image(asset: Asset) -> bool:
    """Return True if the asset's content type names an image.

    A missing file or content type counts as non-image.
    """
    content_type = asset.file.content_type if asset.file is not None else None
    return content_type is not None and "image" in content_type.lower()


class AssetRenderer:
    """Render Asset nodes and Blocks that embed one."""

    priority = DEFAULT_PRIORITY

    __slots__ = ()

    def matches(self, node: Node) -> bool:
        match node:
            case Asset():
                return True
            case Block(target=Asset()):
                return True
            case Block(target=EntityReference(link_type="Asset")):
                return True
            case _:
                return False

    def render(self, node: Asset | Block) -> str:
        asset = self._asset_for(node)
        if asset is None:
            return ""

        if asset.file is None:
            raise MalformedNodeError("Asset", f"{asset.title!r} has no file")

        url = interpolate(asset.file.url)
        title = interpolate(asset.title)
        if is_image(asset):
            return f'<img src="{url}" alt="{title}" />'
        return f'<a href="{url}">{title}</a>'

    def _asset_for(self, node: Asset | Block) -> Asset | None:
        if isinstance(node, Asset):
            return node

        target = node.target
        if isinstance(target, Asset):
            return target

        resolver = get_render_config().asset_resolver
        asset = resolver(target) if resolver is not None else None
        if asset is None:
            logger.debug("Unresolved asset reference %r; dropping block", target.id)
            return None
        if not isinstance(asset, Asset):
            raise MalformedNodeError(
                "Block",
                f"asset_resolver returned {type(asset).__name__} for reference {target.id!r}",
            )
        return asset
