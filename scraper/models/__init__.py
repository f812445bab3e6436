from .page_model import (
    ExtractedPage,
    PageHeading,
    PageImage,
    PageLink,
    PageList,
    PageTable,
)

__all__ = [
    "ExtractedPage",
    "PageHeading",
    "PageImage",
    "PageLink",
    "PageList",
    "PageTable",
]
