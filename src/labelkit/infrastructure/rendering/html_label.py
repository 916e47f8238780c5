"""HTML label document for 58mm x 40mm thermal label stock.

The bars themselves are drawn by the Libre Barcode 39 web font; this
module only lays out the text around them.
"""

from __future__ import annotations

from jinja2 import Environment, StrictUndefined

from labelkit.domain.model.label import LabelData

LABEL_TEMPLATE = """\
<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <title>Print Barcode</title>
  <link href="https://fonts.googleapis.com/css2?family=Libre+Barcode+39&display=swap" rel="stylesheet">
  <style>
    @page { size: {{ page_width }} {{ page_height }}; margin: 0; }
    body {
      margin: 0;
      padding: 0;
      display: flex;
      justify-content: center;
      align-items: center;
      min-height: 100vh;
    }
    .barcode-container { width: {{ page_width }}; padding: 2mm; text-align: center; }
    .barcode {
      font-family: 'Libre Barcode 39', cursive;
      font-size: 40px;
      line-height: 1;
      margin: 2mm 0;
      white-space: nowrap;
      height: 15mm;
    }
    .barcode-number { font-family: monospace; font-size: 11px; margin: 1mm 0; letter-spacing: 1px; }
    .product-name {
      font-family: Arial, sans-serif;
      font-size: 12px;
      margin: 1mm 0;
      white-space: nowrap;
      overflow: hidden;
      text-overflow: ellipsis;
    }
    .price { font-family: Arial, sans-serif; font-size: 12px; font-weight: bold; margin: 1mm 0; }
    @media print {
      body { -webkit-print-color-adjust: exact; print-color-adjust: exact; }
    }
  </style>
</head>
<body>
  <div class="barcode-container">
    <div class="barcode">*{{ code }}*</div>
    <div class="barcode-number">{{ code }}</div>
    <div class="product-name">{{ name }}</div>
    <div class="price">{{ price }}</div>
  </div>
</body>
</html>
"""


class HtmlLabelRenderer:

    def __init__(self, page_width: str = "58mm", page_height: str = "40mm") -> None:
        self._page_width = page_width
        self._page_height = page_height
        env = Environment(autoescape=True, undefined=StrictUndefined)
        self._template = env.from_string(LABEL_TEMPLATE)

    def render(self, data: LabelData) -> str:
        return self._template.render(
            code=str(data.code),
            name=data.name,
            price=data.price.label(),
            page_width=self._page_width,
            page_height=self._page_height,
        )

    __call__ = render
