"""Resolve embedded asset references from your own asset store."""

from lienzo import (
    Asset,
    AssetFile,
    Block,
    Document,
    EntityReference,
    HtmlRenderer,
    RenderConfig,
)

ASSETS = {
    "hero": Asset(title="Hero", file=AssetFile(url="//cdn/hero.jpg", content_type="image/jpeg")),
    "brochure": Asset(
        title="Brochure", file=AssetFile(url="//cdn/b.pdf", content_type="application/pdf")
    ),
}

renderer = HtmlRenderer(config=RenderConfig(asset_resolver=lambda ref: ASSETS.get(ref.id)))

doc = Document(
    content=(
        Block(target=EntityReference("hero")),
        Block(target=EntityReference("brochure")),
        Block(target=EntityReference("missing")),  # dropped
    )
)
print(renderer.render(doc))
