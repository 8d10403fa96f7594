import PIL.Image
import pytest

import conftest
import glyph_specimen.compose


#============================================
def test_parse_color_forms() -> None:
	"""
	Ensure hex strings and tuples parse to RGBA.
	"""
	assert glyph_specimen.compose.parse_color("#FAF0F1") == (250, 240, 241, 255)
	assert glyph_specimen.compose.parse_color("#00000080") == (0, 0, 0, 128)
	assert glyph_specimen.compose.parse_color((1, 2, 3)) == (1, 2, 3, 255)
	assert glyph_specimen.compose.parse_color((1, 2, 3, 4)) == (1, 2, 3, 4)


#============================================
@pytest.mark.parametrize("value", ["", "red", "#12345", "#GG0000", (1, 2), (0, 0, 300)])
def test_parse_color_rejects_invalid(value) -> None:
	"""
	Ensure malformed colors raise ValueError.
	"""
	with pytest.raises(ValueError):
		glyph_specimen.compose.parse_color(value)


#============================================
def test_new_canvas_seeds_background() -> None:
	"""
	Ensure the canvas starts filled with the background color.
	"""
	canvas = glyph_specimen.compose.new_canvas(5, 4, (10, 20, 30, 255))
	assert canvas.mode == "RGBA"
	assert canvas.size == (5, 4)
	assert canvas.getpixel((4, 3)) == (10, 20, 30, 255)


#============================================
def test_colorize_uses_coverage_as_alpha() -> None:
	"""
	Ensure glyph intensities become the foreground alpha.
	"""
	glyph = conftest.make_glyph(1, width=2, rows=1, top=1, value=200)
	image = glyph_specimen.compose.colorize_glyph(glyph, (250, 240, 241, 255))
	assert image.size == (2, 1)
	assert image.getpixel((0, 0)) == (250, 240, 241, 200)


#============================================
def test_colorize_scales_by_foreground_alpha() -> None:
	"""
	Ensure a translucent foreground scales the coverage.
	"""
	glyph = conftest.make_glyph(1, width=1, rows=1, top=1, value=255)
	image = glyph_specimen.compose.colorize_glyph(glyph, (0, 0, 0, 128))
	assert image.getpixel((0, 0))[3] == 128


#============================================
def test_composite_blends_with_canvas() -> None:
	"""
	Ensure compositing blends instead of overwriting.
	"""
	canvas = glyph_specimen.compose.new_canvas(4, 4)
	glyph = conftest.make_glyph(1, width=2, rows=2, top=2, value=128)
	image = glyph_specimen.compose.colorize_glyph(glyph)
	assert glyph_specimen.compose.composite_glyph(canvas, image, 1, 1)
	red, green, blue, alpha = canvas.getpixel((1, 1))
	assert 120 <= red <= 135
	assert red == green == blue
	assert alpha == 255
	assert canvas.getpixel((0, 0)) == (255, 255, 255, 255)


#============================================
def test_composite_clips_at_edges() -> None:
	"""
	Ensure sources past any edge are clipped and the canvas keeps its size.
	"""
	canvas = glyph_specimen.compose.new_canvas(10, 10)
	image = PIL.Image.new("RGBA", (6, 6), (0, 0, 0, 255))
	assert glyph_specimen.compose.composite_glyph(canvas, image, 7, 7)
	assert glyph_specimen.compose.composite_glyph(canvas, image, -3, -4)
	assert canvas.size == (10, 10)
	assert canvas.getpixel((9, 9)) == (0, 0, 0, 255)
	assert canvas.getpixel((2, 1)) == (0, 0, 0, 255)
	assert canvas.getpixel((3, 1)) == (255, 255, 255, 255)
	assert canvas.getpixel((2, 2)) == (255, 255, 255, 255)


#============================================
def test_composite_outside_canvas_is_noop() -> None:
	"""
	Ensure a source entirely outside the canvas changes nothing.
	"""
	canvas = glyph_specimen.compose.new_canvas(10, 10)
	before = canvas.tobytes()
	image = PIL.Image.new("RGBA", (3, 3), (0, 0, 0, 255))
	assert not glyph_specimen.compose.composite_glyph(canvas, image, 10, 0)
	assert not glyph_specimen.compose.composite_glyph(canvas, image, 0, -3)
	assert canvas.tobytes() == before


#============================================
def test_crop_keeps_rows() -> None:
	"""
	Ensure cropping narrows a glyph and keeps its full height.
	"""
	image = PIL.Image.new("RGBA", (10, 20))
	cropped = glyph_specimen.compose.crop_glyph(image, 4)
	assert cropped.size == (4, 20)
