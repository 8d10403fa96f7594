"""
Pytest configuration for local imports and a stand-in font face.
"""

# Standard Library
import os
import sys

# PIP3 modules
import pytest

#============================================


def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()

import glyph_specimen.glyph_source


GlyphBitmap = glyph_specimen.glyph_source.GlyphBitmap

CHAR_OFFSET = 3
SPACE_CODE = ord(" ") + CHAR_OFFSET


#============================================
def make_glyph(
	code: int,
	width: int = 10,
	rows: int = 20,
	top: int = 20,
	left: int = 1,
	advance: float = 12.0,
	value: int = 255,
) -> GlyphBitmap:
	"""
	Build a solid rectangular glyph.

	Args:
		code: Glyph identifier.
		width: Bitmap width.
		rows: Bitmap height.
		top: Distance from baseline to the bitmap top.
		left: Left bearing.
		advance: Horizontal advance.
		value: Coverage of every pixel.

	Returns:
		GlyphBitmap whose bbox matches the bitmap.
	"""
	return GlyphBitmap(
		code=code,
		width=width,
		rows=rows,
		left=left,
		top=top,
		h_advance=advance,
		pixels=bytes([value]) * (width * rows),
		bbox=(left, top - rows, left + width, top),
	)


#============================================
class FakeFace:
	"""
	Face with solid 10x20 glyphs, a blank space and a fixed char map.
	"""

	num_glyphs = 256

	def __init__(self, glyphs: dict[int, GlyphBitmap] | None = None):
		self.glyphs = dict(glyphs or {})
		self.rasterized: list[int] = []

	def map_char_to_glyph(self, codepoint: int) -> int:
		return codepoint + CHAR_OFFSET

	def rasterize(self, code: int) -> GlyphBitmap:
		self.rasterized.append(code)
		if code in self.glyphs:
			return self.glyphs[code]
		if code == SPACE_CODE:
			return GlyphBitmap(code, 0, 0, 0, 0, 8.0, b"", (0, 0, 0, 0))
		return make_glyph(code)


#============================================
@pytest.fixture
def fake_face() -> FakeFace:
	return FakeFace()
