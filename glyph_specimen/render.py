"""
Line and grid layout of glyph bitmaps onto a canvas.
"""

# Standard Library
import dataclasses
import math

# PIP3 modules
import PIL.Image
import PIL.ImageDraw

# local repo modules
import glyph_specimen.compose
import glyph_specimen.config
import glyph_specimen.glyph_source


RenderConfig = glyph_specimen.config.RenderConfig
RenderResult = glyph_specimen.config.RenderResult
GlyphPlacement = glyph_specimen.config.GlyphPlacement
DividerLine = glyph_specimen.config.DividerLine
ConfigurationError = glyph_specimen.config.ConfigurationError
InputError = glyph_specimen.config.InputError
GlyphBitmap = glyph_specimen.glyph_source.GlyphBitmap

DIVIDER_COLOR = glyph_specimen.config.DIVIDER_COLOR


@dataclasses.dataclass(frozen=True)
class GridGeometry:
	items_per_line: int
	h_advance: int
	v_advance: int
	top_margin: int
	left_margin: int
	lines: int
	width: int
	height: int


#============================================
def compute_line_geometry(glyphs: list[GlyphBitmap]) -> tuple[int, int]:
	"""
	Compute the shared baseline offset and canvas height for a strip.

	Args:
		glyphs: Rasterized glyphs of the strip.

	Returns:
		Tuple of (y_min, height). y_min is never positive.
	"""
	y_min = 0
	height = 0
	for glyph in glyphs:
		glyph_height = glyph.bbox_height + 1
		if glyph_height > height:
			height = glyph_height
		if glyph.bbox[1] < y_min:
			y_min = glyph.bbox[1]
	height -= y_min
	return (y_min, height)


#============================================
def render_line(face, config: RenderConfig, *composition) -> RenderResult:
	"""
	Render glyphs left to right on a single strip.

	Accepts render_line(face, config, "text"),
	render_line(face, config, [11, 133]) and
	render_line(face, config, 11, 133).

	Args:
		face: Loaded face, or None.
		config: Render configuration; image_width is required.
		composition: Text or glyph identifiers.

	Returns:
		RenderResult; unsuccessful when width or face is missing or
		the composition is empty.
	"""
	if not config.image_width or config.image_width <= 0:
		return glyph_specimen.config.failed_result(
			ConfigurationError("image width is not set"), config.verbose
		)
	if face is None:
		return glyph_specimen.config.failed_result(
			ConfigurationError("no font face loaded"), config.verbose
		)

	normalized = glyph_specimen.glyph_source.normalize_composition(composition)
	codes = glyph_specimen.glyph_source.glyph_codes_from(face, normalized)
	if not codes:
		return glyph_specimen.config.failed_result(
			InputError("composition is empty"), config.verbose
		)

	glyphs = glyph_specimen.glyph_source.resolve_glyphs(face, codes)
	y_min, height = compute_line_geometry(glyphs)
	width = config.image_width
	if config.verbose:
		print(f"Line: {len(glyphs)} glyphs on {width}x{height}")

	canvas = glyph_specimen.compose.new_canvas(width, height, config.background_color)
	placements: list[GlyphPlacement] = []
	x = config.left_margin
	for glyph in glyphs:
		if not glyph.is_blank:
			glyph_x = x + glyph.left
			glyph_y = height - glyph.top + y_min
			image = glyph_specimen.compose.colorize_glyph(glyph, config.foreground_color)
			cropped = False
			if glyph_x + glyph.width >= width:
				remaining = width - glyph_x
				if remaining <= 0:
					break
				image = glyph_specimen.compose.crop_glyph(image, remaining)
				cropped = True
			glyph_specimen.compose.composite_glyph(canvas, image, glyph_x, glyph_y)
			placements.append(
				GlyphPlacement(glyph.code, glyph_x, glyph_y, image.width, image.height, cropped)
			)
		advance = config.h_advance if config.h_advance is not None else glyph.h_advance
		x = int(x + advance)

	return RenderResult(
		success=True,
		image=canvas,
		glyph_codes=codes,
		width=width,
		height=height,
		placements=placements,
	)


#============================================
def compute_grid_geometry(count: int, config: RenderConfig) -> GridGeometry:
	"""
	Compute cell layout and canvas size for a specimen grid.

	Args:
		count: Number of glyphs.
		config: Render configuration with advances and items_per_line.

	Returns:
		GridGeometry.
	"""
	items_per_line = int(config.items_per_line)
	h_advance = int(config.h_advance)
	v_advance = int(config.v_advance)
	lines = math.ceil(count / items_per_line)
	return GridGeometry(
		items_per_line=items_per_line,
		h_advance=h_advance,
		v_advance=v_advance,
		top_margin=config.top_margin,
		left_margin=config.left_margin,
		lines=lines,
		width=items_per_line * h_advance,
		height=lines * v_advance,
	)


#============================================
def draw_divider_lines(canvas: PIL.Image.Image, geometry: GridGeometry) -> list[DividerLine]:
	"""
	Draw gray lines between grid cells.

	Horizontal lines sit a third of a cell below the top margin rather
	than on the row boundary.

	Args:
		canvas: Grid canvas, modified in place.
		geometry: Grid geometry.

	Returns:
		The lines drawn.
	"""
	dividers: list[DividerLine] = []
	x = geometry.h_advance
	for _ in range(geometry.items_per_line - 1):
		dividers.append(DividerLine(x, 0, x, geometry.height))
		x += geometry.h_advance
	y = int(geometry.top_margin + geometry.h_advance / 3.0)
	for _ in range(geometry.lines - 1):
		dividers.append(DividerLine(0, y, geometry.width, y))
		y += geometry.v_advance

	draw = PIL.ImageDraw.Draw(canvas)
	for line in dividers:
		draw.line([(line.x0, line.y0), (line.x1, line.y1)], fill=DIVIDER_COLOR)
	return dividers


#============================================
def render_matrix(
	face,
	config: RenderConfig,
	codes: list[int],
	draw_lines: bool | None = None,
) -> RenderResult:
	"""
	Render glyph identifiers into a grid of equal cells.

	Args:
		face: Loaded face, or None.
		config: Render configuration; h_advance, v_advance and
			items_per_line are required.
		codes: Glyph identifiers in reading order.
		draw_lines: Divider lines on or off; None uses config.draw_lines.

	Returns:
		RenderResult with the computed size and row count.
	"""
	for name in ("h_advance", "v_advance", "items_per_line"):
		value = getattr(config, name)
		if value is None or value <= 0:
			return glyph_specimen.config.failed_result(
				ConfigurationError(f"{name} is not set"), config.verbose
			)
	if face is None:
		return glyph_specimen.config.failed_result(
			ConfigurationError("no font face loaded"), config.verbose
		)

	if isinstance(codes, str):
		raise InputError("grid rendering takes glyph identifiers, not text")
	normalized = glyph_specimen.glyph_source.normalize_composition((codes,))
	code_list = list(normalized.codes)
	if not code_list:
		return glyph_specimen.config.failed_result(
			InputError("no glyph identifiers given"), config.verbose
		)
	if draw_lines is None:
		draw_lines = config.draw_lines

	geometry = compute_grid_geometry(len(code_list), config)
	if config.verbose:
		print(
			f"Grid: {len(code_list)} glyphs, {geometry.items_per_line} per line, "
			f"{geometry.lines} lines on {geometry.width}x{geometry.height}"
		)

	canvas = glyph_specimen.compose.new_canvas(
		geometry.width, geometry.height, config.background_color
	)
	placements: list[GlyphPlacement] = []
	y = geometry.top_margin
	for start in range(0, len(code_list), geometry.items_per_line):
		x = geometry.left_margin
		for code in code_list[start:start + geometry.items_per_line]:
			glyph = face.rasterize(code)
			if not glyph.is_blank:
				glyph_x = x + int(geometry.h_advance / 2.0 - glyph.bbox_width / 2.0)
				glyph_y = y - glyph.top
				image = glyph_specimen.compose.colorize_glyph(glyph, config.foreground_color)
				glyph_specimen.compose.composite_glyph(canvas, image, glyph_x, glyph_y)
				placements.append(GlyphPlacement(code, glyph_x, glyph_y, glyph.width, glyph.rows))
			x += geometry.h_advance
		y += geometry.v_advance

	dividers: list[DividerLine] = []
	if draw_lines:
		dividers = draw_divider_lines(canvas, geometry)

	return RenderResult(
		success=True,
		image=canvas,
		glyph_codes=code_list,
		width=geometry.width,
		height=geometry.height,
		lines=geometry.lines,
		placements=placements,
		dividers=dividers,
	)
