"""
Core block type definitions.

Attribute schemas for the core block types patterns are built from. Only the
parts of each schema that influence `prepare_attributes_for_render` are kept:
the JSON type, any `enum`, and any `default`. Attributes sourced from the
block's markup (e.g. a paragraph's `content`) carry no default, so they never
make an untouched block look edited.
"""

from __future__ import annotations

from typing import Any

from pattern_validation.core.registry.block_types import BlockType

Schema = dict[str, dict[str, Any]]

# Attributes every block gains from its "supports" declaration.
_SHARED: Schema = {
    "lock": {"type": "object"},
    "metadata": {"type": "object"},
    "className": {"type": "string"},
    "style": {"type": "object"},
    "anchor": {"type": "string"},
}

_COLOR: Schema = {
    "backgroundColor": {"type": "string"},
    "textColor": {"type": "string"},
    "gradient": {"type": "string"},
}

_TYPOGRAPHY: Schema = {
    "fontSize": {"type": "string"},
    "fontFamily": {"type": "string"},
}

_LAYOUT: Schema = {
    "layout": {"type": "object"},
    "align": {"type": "string", "enum": ["left", "center", "right", "wide", "full", ""]},
}


def _block(name: str, attributes: Schema, *extra: Schema) -> BlockType:
    merged: Schema = {**_SHARED}
    for part in extra:
        merged.update(part)
    merged.update(attributes)
    return BlockType(name=name, attributes=merged)


CORE_BLOCK_TYPES: tuple[BlockType, ...] = (
    # --- Text -----------------------------------------------------------------
    _block(
        "core/paragraph",
        {
            "align": {"type": "string"},
            "content": {"type": "string"},
            "dropCap": {"type": "boolean", "default": False},
            "placeholder": {"type": "string"},
            "direction": {"type": "string", "enum": ["ltr", "rtl"]},
        },
        _COLOR,
        _TYPOGRAPHY,
    ),
    _block(
        "core/heading",
        {
            "textAlign": {"type": "string"},
            "content": {"type": "string"},
            "level": {"type": "number", "default": 2},
            "placeholder": {"type": "string"},
        },
        _COLOR,
        _TYPOGRAPHY,
    ),
    _block(
        "core/list",
        {
            "ordered": {"type": "boolean", "default": False},
            "values": {"type": "string", "default": ""},
            "type": {"type": "string"},
            "start": {"type": "number"},
            "reversed": {"type": "boolean"},
            "placeholder": {"type": "string"},
        },
        _COLOR,
        _TYPOGRAPHY,
    ),
    _block(
        "core/list-item",
        {"placeholder": {"type": "string"}, "content": {"type": "string"}},
        _TYPOGRAPHY,
    ),
    _block(
        "core/quote",
        {
            "value": {"type": "string", "default": ""},
            "citation": {"type": "string", "default": ""},
            "align": {"type": "string"},
        },
        _COLOR,
        _TYPOGRAPHY,
    ),
    _block(
        "core/pullquote",
        {
            "value": {"type": "string"},
            "citation": {"type": "string"},
            "textAlign": {"type": "string"},
        },
        _COLOR,
    ),
    _block(
        "core/verse",
        {"content": {"type": "string"}, "textAlign": {"type": "string"}},
        _COLOR,
        _TYPOGRAPHY,
    ),
    _block("core/code", {"content": {"type": "string"}}, _COLOR, _TYPOGRAPHY),
    _block("core/preformatted", {"content": {"type": "string"}}, _COLOR, _TYPOGRAPHY),
    _block("core/html", {"content": {"type": "string"}}),
    _block(
        "core/table",
        {
            "hasFixedLayout": {"type": "boolean", "default": False},
            "caption": {"type": "string"},
            "head": {"type": "array", "default": []},
            "body": {"type": "array", "default": []},
            "foot": {"type": "array", "default": []},
        },
        _COLOR,
    ),
    # --- Media ----------------------------------------------------------------
    _block(
        "core/image",
        {
            "align": {"type": "string"},
            "url": {"type": "string"},
            "alt": {"type": "string", "default": ""},
            "caption": {"type": "string"},
            "title": {"type": "string"},
            "href": {"type": "string"},
            "rel": {"type": "string"},
            "linkClass": {"type": "string"},
            "id": {"type": "number"},
            "width": {"type": ["number", "string"]},
            "height": {"type": ["number", "string"]},
            "sizeSlug": {"type": "string"},
            "linkDestination": {"type": "string"},
            "linkTarget": {"type": "string"},
        },
    ),
    _block(
        "core/gallery",
        {
            "images": {"type": "array", "default": []},
            "ids": {"type": "array", "default": []},
            "shortCodeTransforms": {"type": "array", "default": []},
            "columns": {"type": "number"},
            "caption": {"type": "string"},
            "imageCrop": {"type": "boolean", "default": True},
            "fixedHeight": {"type": "boolean", "default": True},
            "linkTarget": {"type": "string"},
            "linkTo": {"type": "string"},
            "sizeSlug": {"type": "string", "default": "large"},
            "allowResize": {"type": "boolean", "default": False},
        },
        _LAYOUT,
    ),
    _block(
        "core/cover",
        {
            "url": {"type": "string"},
            "useFeaturedImage": {"type": "boolean", "default": False},
            "id": {"type": "number"},
            "alt": {"type": "string", "default": ""},
            "hasParallax": {"type": "boolean", "default": False},
            "isRepeated": {"type": "boolean", "default": False},
            "dimRatio": {"type": "number", "default": 100},
            "overlayColor": {"type": "string"},
            "customOverlayColor": {"type": "string"},
            "backgroundType": {"type": "string", "default": "image"},
            "focalPoint": {"type": "object"},
            "minHeight": {"type": "number"},
            "minHeightUnit": {"type": "string"},
            "customGradient": {"type": "string"},
            "contentPosition": {"type": "string"},
            "isDark": {"type": "boolean", "default": True},
            "templateLock": {"type": ["string", "boolean"]},
            "tagName": {"type": "string", "default": "div"},
        },
        _LAYOUT,
        {"gradient": {"type": "string"}},
    ),
    _block(
        "core/media-text",
        {
            "align": {"type": "string", "default": "none"},
            "mediaAlt": {"type": "string", "default": ""},
            "mediaPosition": {"type": "string", "default": "left"},
            "mediaId": {"type": "number"},
            "mediaUrl": {"type": "string"},
            "mediaLink": {"type": "string"},
            "linkDestination": {"type": "string"},
            "linkTarget": {"type": "string"},
            "href": {"type": "string"},
            "rel": {"type": "string"},
            "linkClass": {"type": "string"},
            "mediaType": {"type": "string"},
            "mediaWidth": {"type": "number", "default": 50},
            "mediaSizeSlug": {"type": "string"},
            "isStackedOnMobile": {"type": "boolean", "default": True},
            "verticalAlignment": {"type": "string"},
            "imageFill": {"type": "boolean"},
            "focalPoint": {"type": "object"},
        },
        _COLOR,
    ),
    _block(
        "core/embed",
        {
            "url": {"type": "string"},
            "caption": {"type": "string"},
            "type": {"type": "string"},
            "providerNameSlug": {"type": "string"},
            "allowResponsive": {"type": "boolean", "default": True},
            "responsive": {"type": "boolean", "default": False},
            "previewable": {"type": "boolean", "default": True},
        },
    ),
    # --- Design ---------------------------------------------------------------
    _block("core/buttons", {}, _LAYOUT, _TYPOGRAPHY),
    _block(
        "core/button",
        {
            "url": {"type": "string"},
            "title": {"type": "string"},
            "text": {"type": "string"},
            "linkTarget": {"type": "string"},
            "rel": {"type": "string"},
            "placeholder": {"type": "string"},
            "width": {"type": "number"},
        },
        _COLOR,
        _TYPOGRAPHY,
    ),
    _block(
        "core/group",
        {
            "tagName": {"type": "string", "default": "div"},
            "templateLock": {"type": ["string", "boolean"]},
        },
        _COLOR,
        _LAYOUT,
    ),
    _block(
        "core/columns",
        {
            "verticalAlignment": {"type": "string"},
            "isStackedOnMobile": {"type": "boolean", "default": True},
        },
        _COLOR,
        _LAYOUT,
    ),
    _block(
        "core/column",
        {
            "verticalAlignment": {"type": "string"},
            "width": {"type": "string"},
            "templateLock": {"type": ["string", "boolean"]},
        },
        _COLOR,
        {"layout": {"type": "object"}},
    ),
    _block(
        "core/separator",
        {"opacity": {"type": "string", "default": "alpha-channel"}},
        {"backgroundColor": {"type": "string"}, "gradient": {"type": "string"}},
    ),
    _block(
        "core/spacer",
        {"height": {"type": "string", "default": "100px"}, "width": {"type": "string"}},
    ),
    # --- Widgets (rendered server-side) ---------------------------------------
    _block(
        "core/archives",
        {
            "displayAsDropdown": {"type": "boolean", "default": False},
            "showLabel": {"type": "boolean", "default": True},
            "showPostCounts": {"type": "boolean", "default": False},
            "type": {"type": "string", "default": "monthly"},
        },
    ),
    _block(
        "core/calendar",
        {"month": {"type": "integer"}, "year": {"type": "integer"}},
    ),
    _block(
        "core/latest-posts",
        {
            "categories": {"type": "array"},
            "selectedAuthor": {"type": "number"},
            "postsToShow": {"type": "number", "default": 5},
            "displayPostContent": {"type": "boolean", "default": False},
            "displayPostContentRadio": {"type": "string", "default": "excerpt"},
            "excerptLength": {"type": "number", "default": 55},
            "displayAuthor": {"type": "boolean", "default": False},
            "displayPostDate": {"type": "boolean", "default": False},
            "postLayout": {"type": "string", "default": "list"},
            "columns": {"type": "number", "default": 3},
            "order": {"type": "string", "default": "desc"},
            "orderBy": {"type": "string", "default": "date"},
            "displayFeaturedImage": {"type": "boolean", "default": False},
            "featuredImageAlign": {"type": "string", "enum": ["left", "center", "right"]},
            "featuredImageSizeSlug": {"type": "string", "default": "thumbnail"},
            "addLinkToFeaturedImage": {"type": "boolean", "default": False},
        },
    ),
    _block(
        "core/tag-cloud",
        {
            "numberOfTags": {"type": "number", "default": 45},
            "taxonomy": {"type": "string", "default": "post_tag"},
            "showTagCounts": {"type": "boolean", "default": False},
            "smallestFontSize": {"type": "string", "default": "8pt"},
            "largestFontSize": {"type": "string", "default": "22pt"},
        },
    ),
    _block(
        "core/search",
        {
            "label": {"type": "string"},
            "showLabel": {"type": "boolean", "default": True},
            "placeholder": {"type": "string", "default": ""},
            "width": {"type": "number"},
            "widthUnit": {"type": "string"},
            "buttonText": {"type": "string"},
            "buttonPosition": {"type": "string", "default": "button-outside"},
            "buttonUseIcon": {"type": "boolean", "default": False},
            "query": {"type": "object", "default": {}},
            "isSearchFieldHidden": {"type": "boolean", "default": False},
        },
        _COLOR,
    ),
    _block(
        "core/social-links",
        {
            "iconColor": {"type": "string"},
            "customIconColor": {"type": "string"},
            "iconBackgroundColor": {"type": "string"},
            "customIconBackgroundColor": {"type": "string"},
            "openInNewTab": {"type": "boolean", "default": False},
            "showLabels": {"type": "boolean", "default": False},
            "size": {"type": "string"},
        },
        _LAYOUT,
    ),
    _block(
        "core/social-link",
        {
            "url": {"type": "string"},
            "service": {"type": "string"},
            "label": {"type": "string"},
            "rel": {"type": "string"},
        },
    ),
)

__all__ = ["CORE_BLOCK_TYPES"]
