"""Tests for SVG export ("Download Shape").

Parses the generated document with ElementTree and checks the layout.
"""

import dataclasses
import xml.etree.ElementTree as ET

import pytest

from skishape_designer.constants import ExportConfig
from skishape_designer.model.point import Point2D
from skishape_designer.model.ski_outline import SkiOutline
from skishape_designer.ui.svg_export import build_svg, outline_path_d, parameter_lines

SVG = f"{{{ExportConfig.SVG_NAMESPACE}}}"


@pytest.fixture
def svg_root(tapered_outline: SkiOutline) -> ET.Element:
    return ET.fromstring(build_svg(tapered_outline))


class TestOutlinePathD:
    """outline_path_d - closed path commands."""

    def test_two_decimals(self) -> None:
        d = outline_path_d([Point2D(x=1.0, y=2.0), Point2D(x=3.25, y=-4.0)])
        assert d == "M 1.00 2.00 L 3.25 -4.00 Z"

    def test_empty(self) -> None:
        assert outline_path_d([]) == ""

    def test_full_outline(self, tapered_outline: SkiOutline) -> None:
        """One M, one L per remaining point, closed with Z."""
        d = outline_path_d(tapered_outline.outline)
        assert d.startswith("M 0.00 0.00 L ")
        assert d.endswith(" Z")
        assert d.count("L ") == len(tapered_outline.outline) - 1


class TestBuildSvg:
    """build_svg - standalone SVG document."""

    def test_root_attributes(self, svg_root: ET.Element) -> None:
        assert svg_root.tag == f"{SVG}svg"
        assert svg_root.get("width") == "1870"
        assert svg_root.get("height") == "300"
        assert svg_root.get("viewBox") == "0 -150 1870 300"

    def test_outline_path(self, svg_root: ET.Element, tapered_outline: SkiOutline) -> None:
        path = svg_root.find(f"{SVG}path")
        assert path is not None
        assert path.get("d") == outline_path_d(tapered_outline.outline)
        assert path.get("fill") == "lightgray"
        assert path.get("stroke-width") == "2"

    def test_mount_point(self, svg_root: ET.Element) -> None:
        circle = svg_root.find(f"{SVG}circle")
        assert circle is not None
        assert circle.get("cx") == "1035"
        assert circle.get("cy") == "0"
        assert circle.get("fill") == "red"

    def test_tip_tail_labels(self, svg_root: ET.Element) -> None:
        labels = {text.text: text.get("x") for text in svg_root.findall(f"{SVG}text") if text.text}
        assert labels["Tip"] == "10"
        assert labels["Tail"] == "1810"

    def test_parameter_listing(self, svg_root: ET.Element) -> None:
        lines = [tspan.text for tspan in svg_root.iter(f"{SVG}tspan")]
        assert lines[0] == "Total Length: 1870 mm"
        assert "Tip Taper Width: 135 mm" in lines
        assert lines[-1] == "Setback: 100 mm"
        assert len(lines) == 11


class TestParameterLines:
    """parameter_lines - labels with units."""

    def test_fractional_values(self, tapered_outline: SkiOutline) -> None:
        outline = dataclasses.replace(
            tapered_outline, params=tapered_outline.params.with_changes(waist_width=98.5)
        )
        assert "Waist Width: 98.5 mm" in parameter_lines(outline)
