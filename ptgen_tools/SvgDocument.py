# ptgen_tools/SvgDocument.py
"""
Minimal SVG writer shared by the SVG outputs.
"""
import sys

BOUNDING_BOX_STYLE = """rect.boundingBox {
    stroke: blue;
    stroke-width: .05;
    fill-opacity: 0;
    stroke-opacity: .5;
}"""


class SvgDocument:

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def write(self, text):
        self.stream.write(text + '\n')

    def open(self, view_box, style):
        min_x, min_y, width, height = view_box
        self.write(f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}mm" height="{height}mm"'
                   f' viewBox="{min_x} {min_y} {width} {height}">')
        self.write('<style><![CDATA[')
        self.write(BOUNDING_BOX_STYLE)
        if style:
            self.write(style)
        self.write(']]></style>')

    def close(self):
        self.write('</svg>')

    def path(self, points, css_class, element_id, closed=False, desc=None):
        d = 'M' + ''.join(f' {p.real:f},{p.imag:f}' for p in points)
        if closed:
            d += ' z'
        if desc is None:
            self.write(f'<path class="{css_class}" id="{element_id}" d="{d}"/>')
        else:
            self.write(f'<path class="{css_class}" id="{element_id}" d="{d}">'
                       f'<desc>{desc}</desc></path>')

    def rect(self, origin, size, css_class):
        self.write(f'<rect x="{origin.real:f}" y="{origin.imag:f}" width="{size.real:f}"'
                   f' height="{size.imag:f}" class="{css_class}"/>')
