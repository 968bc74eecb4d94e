"""Shared constants for pugtree."""

from __future__ import annotations

from types import MappingProxyType

# Element factory every compiled call targets unless the environment overrides it.
DEFAULT_FACTORY = "React.createElement"

# Default nesting limit for tags, blocks, includes and extends.
DEFAULT_MAX_DEPTH = 64

# Markup attribute name -> React DOM property name.
# HTML attributes whose React spelling differs from the lowercase HTML one.
# Last updated: 2026-01
ATTRIBUTE_TRANSLATIONS: MappingProxyType[str, str] = MappingProxyType(
    {
        "class": "className",
        "for": "htmlFor",
        "accept-charset": "acceptCharset",
        "accesskey": "accessKey",
        "allowfullscreen": "allowFullScreen",
        "autocapitalize": "autoCapitalize",
        "autocomplete": "autoComplete",
        "autocorrect": "autoCorrect",
        "autofocus": "autoFocus",
        "autoplay": "autoPlay",
        "cellpadding": "cellPadding",
        "cellspacing": "cellSpacing",
        "charset": "charSet",
        "classid": "classID",
        "colspan": "colSpan",
        "contenteditable": "contentEditable",
        "contextmenu": "contextMenu",
        "crossorigin": "crossOrigin",
        "datetime": "dateTime",
        "enctype": "encType",
        "formaction": "formAction",
        "formenctype": "formEncType",
        "formmethod": "formMethod",
        "formnovalidate": "formNoValidate",
        "formtarget": "formTarget",
        "frameborder": "frameBorder",
        "hreflang": "hrefLang",
        "http-equiv": "httpEquiv",
        "inputmode": "inputMode",
        "itemprop": "itemProp",
        "itemscope": "itemScope",
        "itemtype": "itemType",
        "marginheight": "marginHeight",
        "marginwidth": "marginWidth",
        "maxlength": "maxLength",
        "mediagroup": "mediaGroup",
        "minlength": "minLength",
        "novalidate": "noValidate",
        "radiogroup": "radioGroup",
        "readonly": "readOnly",
        "referrerpolicy": "referrerPolicy",
        "rowspan": "rowSpan",
        "spellcheck": "spellCheck",
        "srcdoc": "srcDoc",
        "srclang": "srcLang",
        "srcset": "srcSet",
        "tabindex": "tabIndex",
        "usemap": "useMap",
        # Event handlers
        "onblur": "onBlur",
        "onchange": "onChange",
        "onclick": "onClick",
        "oncontextmenu": "onContextMenu",
        "ondblclick": "onDoubleClick",
        "onfocus": "onFocus",
        "oninput": "onInput",
        "onkeydown": "onKeyDown",
        "onkeypress": "onKeyPress",
        "onkeyup": "onKeyUp",
        "onload": "onLoad",
        "onmousedown": "onMouseDown",
        "onmouseenter": "onMouseEnter",
        "onmouseleave": "onMouseLeave",
        "onmousemove": "onMouseMove",
        "onmouseout": "onMouseOut",
        "onmouseover": "onMouseOver",
        "onmouseup": "onMouseUp",
        "onscroll": "onScroll",
        "onsubmit": "onSubmit",
        "onwheel": "onWheel",
        # SVG presentation attributes
        "clip-path": "clipPath",
        "fill-opacity": "fillOpacity",
        "fill-rule": "fillRule",
        "font-family": "fontFamily",
        "font-size": "fontSize",
        "stop-color": "stopColor",
        "stroke-dasharray": "strokeDasharray",
        "stroke-linecap": "strokeLinecap",
        "stroke-linejoin": "strokeLinejoin",
        "stroke-width": "strokeWidth",
        "text-anchor": "textAnchor",
        "xlink:href": "xlinkHref",
        "xml:lang": "xmlLang",
    }
)
