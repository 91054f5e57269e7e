from themestudio.ui.widgets.code_view import CodeView, SnippetHighlighter
from themestudio.ui.widgets.color_picker import ColorPickerPopup, HueSlider, SaturationValuePanel
from themestudio.ui.widgets.preview_panel import WidgetPreview
from themestudio.ui.widgets.status_strip import StatusStrip
from themestudio.ui.widgets.token_list import ColorTokenRow, TokenListWidget

__all__ = [
    "CodeView",
    "ColorPickerPopup",
    "ColorTokenRow",
    "HueSlider",
    "SaturationValuePanel",
    "SnippetHighlighter",
    "StatusStrip",
    "TokenListWidget",
    "WidgetPreview",
]
