"""
Canvas creation, glyph coloring and alpha compositing.
"""

# PIP3 modules
import PIL.Image

# local repo modules
import glyph_specimen.config
import glyph_specimen.glyph_source


GlyphBitmap = glyph_specimen.glyph_source.GlyphBitmap

DEFAULT_FOREGROUND_COLOR = glyph_specimen.config.DEFAULT_FOREGROUND_COLOR
DEFAULT_BACKGROUND_COLOR = glyph_specimen.config.DEFAULT_BACKGROUND_COLOR


#============================================
def parse_color(value) -> tuple[int, int, int, int]:
	"""
	Parse a color into an RGBA tuple.

	Args:
		value: "#RRGGBB", "#RRGGBBAA", or an RGB/RGBA tuple of 0-255 ints.

	Returns:
		Tuple of (r, g, b, a).
	"""
	if isinstance(value, str):
		text = value.strip()
		if not text.startswith("#") or len(text) not in (7, 9):
			raise ValueError(f"invalid color: {value!r}")
		channels = [int(text[index:index + 2], 16) for index in range(1, len(text), 2)]
	else:
		channels = [int(channel) for channel in value]
	if len(channels) == 3:
		channels.append(255)
	if len(channels) != 4 or any(channel < 0 or channel > 255 for channel in channels):
		raise ValueError(f"invalid color: {value!r}")
	return tuple(channels)


#============================================
def new_canvas(
	width: int,
	height: int,
	background: tuple[int, int, int, int] = DEFAULT_BACKGROUND_COLOR,
) -> PIL.Image.Image:
	return PIL.Image.new("RGBA", (width, height), background)


#============================================
def colorize_glyph(
	glyph: GlyphBitmap,
	foreground: tuple[int, int, int, int] = DEFAULT_FOREGROUND_COLOR,
) -> PIL.Image.Image:
	"""
	Build an RGBA image whose alpha channel is the glyph coverage.

	Args:
		glyph: Rasterized glyph with a grayscale buffer.
		foreground: Fill color; its alpha scales the coverage.

	Returns:
		RGBA image of the glyph's bitmap size.
	"""
	mask = PIL.Image.frombytes("L", (glyph.width, glyph.rows), glyph.pixels)
	opacity = foreground[3]
	if opacity < 255:
		mask = mask.point(lambda value: value * opacity // 255)
	image = PIL.Image.new("RGBA", mask.size, tuple(foreground[:3]) + (0,))
	image.putalpha(mask)
	return image


#============================================
def crop_glyph(image: PIL.Image.Image, width: int) -> PIL.Image.Image:
	return image.crop((0, 0, width, image.height))


#============================================
def composite_glyph(canvas: PIL.Image.Image, image: PIL.Image.Image, x: int, y: int) -> bool:
	"""
	Alpha-blend an image onto the canvas, clipped to the canvas bounds.

	Args:
		canvas: Destination RGBA canvas, modified in place.
		image: Source RGBA image.
		x: Destination left edge.
		y: Destination top edge.

	Returns:
		True if any source pixel landed on the canvas.
	"""
	left = max(0, x)
	top = max(0, y)
	right = min(canvas.width, x + image.width)
	bottom = min(canvas.height, y + image.height)
	if right <= left or bottom <= top:
		return False
	source = (left - x, top - y, right - x, bottom - y)
	canvas.alpha_composite(image, dest=(left, top), source=source)
	return True
