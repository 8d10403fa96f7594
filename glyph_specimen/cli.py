"""
CLI entry points for glyph strip and specimen grid rendering.
"""

# Standard Library
import argparse
import dataclasses
import json
import pathlib
import time

# PIP3 modules
import PIL.Image
import reportlab.lib.utils
import reportlab.pdfgen.canvas

# local repo modules
import glyph_specimen.compose
import glyph_specimen.config
import glyph_specimen.glyph_source
import glyph_specimen.render


RenderConfig = glyph_specimen.config.RenderConfig
RenderResult = glyph_specimen.config.RenderResult
GlyphSpecimenError = glyph_specimen.config.GlyphSpecimenError

DEFAULT_FONT_SIZE = glyph_specimen.config.DEFAULT_FONT_SIZE
DEFAULT_TOP_MARGIN = glyph_specimen.config.DEFAULT_TOP_MARGIN
DEFAULT_LEFT_MARGIN = glyph_specimen.config.DEFAULT_LEFT_MARGIN
DEFAULT_FOREGROUND_COLOR = glyph_specimen.config.DEFAULT_FOREGROUND_COLOR
DEFAULT_BACKGROUND_COLOR = glyph_specimen.config.DEFAULT_BACKGROUND_COLOR


#============================================
def build_config(args: argparse.Namespace) -> RenderConfig:
	"""
	Build render config from CLI args.

	Args:
		args: Parsed argparse namespace.

	Returns:
		RenderConfig.
	"""
	config = RenderConfig(
		font_path=args.font,
		font_size=args.size,
		image_width=args.width,
		h_advance=args.h_advance,
		v_advance=args.v_advance,
		items_per_line=args.items_per_line,
		top_margin=args.top_margin,
		left_margin=args.left_margin,
		foreground_color=args.foreground,
		background_color=args.background,
		draw_lines=args.draw_lines,
		verbose=True,
	)
	return config


#============================================
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	"""
	Parse command line arguments.

	Args:
		argv: Argument list, defaults to sys.argv.

	Returns:
		Parsed argparse namespace.
	"""
	parser = argparse.ArgumentParser(description="Render glyph strips and specimen grids to images.")
	parser.add_argument("font", help="Font file (TrueType, OpenType, Type 1).")

	input_group = parser.add_argument_group("Input")
	composition = input_group.add_mutually_exclusive_group(required=True)
	composition.add_argument("-t", "--text", dest="text", default=None, help="Text to render on one line.")
	composition.add_argument("-c", "--codes", dest="codes", type=int, nargs="+", default=None, help="Glyph identifiers to render on one line.")
	composition.add_argument("-g", "--grid", dest="grid", type=int, nargs="+", default=None, help="Glyph identifiers to render as a grid.")
	input_group.add_argument("-s", "--size", dest="size", type=int, default=DEFAULT_FONT_SIZE, help="Point size.")

	output_group = parser.add_argument_group("Output")
	output_group.add_argument("-o", "--output", dest="output_path", required=True, help="Output image path (.png, .pdf, ...).")
	output_group.add_argument("-m", "--manifest", dest="manifest_path", default=None, help="Output layout JSON path.")

	layout_group = parser.add_argument_group("Layout")
	layout_group.add_argument("-w", "--width", dest="width", type=int, default=None, help="Canvas width for line rendering.")
	layout_group.add_argument("-a", "--h-advance", dest="h_advance", type=int, default=None, help="Fixed horizontal advance (cell width in grids).")
	layout_group.add_argument("-v", "--v-advance", dest="v_advance", type=int, default=None, help="Grid cell height.")
	layout_group.add_argument("-i", "--items-per-line", dest="items_per_line", type=int, default=None, help="Grid columns.")
	layout_group.add_argument("--top-margin", dest="top_margin", type=int, default=DEFAULT_TOP_MARGIN, help="Grid baseline of the first row.")
	layout_group.add_argument("--left-margin", dest="left_margin", type=int, default=DEFAULT_LEFT_MARGIN, help="Starting pen position.")

	color_group = parser.add_argument_group("Colors")
	color_group.add_argument("-f", "--foreground", dest="foreground", type=glyph_specimen.compose.parse_color, default=DEFAULT_FOREGROUND_COLOR, help="Glyph color as #RRGGBB or #RRGGBBAA.")
	color_group.add_argument("-b", "--background", dest="background", type=glyph_specimen.compose.parse_color, default=DEFAULT_BACKGROUND_COLOR, help="Canvas color as #RRGGBB or #RRGGBBAA.")

	behavior_group = parser.add_argument_group("Behavior")
	behavior_group.add_argument("-d", "--draw-lines", dest="draw_lines", action="store_true", help="Draw grid divider lines.")
	behavior_group.add_argument("-D", "--no-draw-lines", dest="draw_lines", action="store_false", help="Disable grid divider lines.")

	parser.set_defaults(draw_lines=True)

	args = parser.parse_args(argv)
	return args


#============================================
def save_image(image: PIL.Image.Image, output_path: pathlib.Path) -> None:
	"""
	Save a rendered canvas; PDF gets one page sized to the image.

	Args:
		image: Rendered RGBA canvas.
		output_path: Output path, format chosen by suffix.
	"""
	if output_path.suffix.lower() == ".pdf":
		pdf = reportlab.pdfgen.canvas.Canvas(str(output_path), pagesize=(image.width, image.height))
		image_reader = reportlab.lib.utils.ImageReader(image)
		pdf.drawImage(image_reader, 0, 0, width=image.width, height=image.height, mask="auto")
		pdf.save()
		return
	if output_path.suffix.lower() in (".jpg", ".jpeg"):
		image = image.convert("RGB")
	image.save(output_path)


#============================================
def write_manifest(
	manifest_path: pathlib.Path,
	config: RenderConfig,
	result: RenderResult,
) -> None:
	"""
	Write a manifest JSON file describing the layout.

	Args:
		manifest_path: Output path.
		config: Render configuration.
		result: Successful render result.
	"""
	data = {
		"font": config.font_path,
		"size": config.font_size,
		"glyph_codes": result.glyph_codes,
		"width": result.width,
		"height": result.height,
		"lines": result.lines,
		"placements": [dataclasses.asdict(placement) for placement in result.placements],
		"dividers": [dataclasses.asdict(line) for line in result.dividers],
		"layout": {
			"h_advance": config.h_advance,
			"v_advance": config.v_advance,
			"items_per_line": config.items_per_line,
			"top_margin": config.top_margin,
			"left_margin": config.left_margin,
			"foreground_color": list(config.foreground_color),
			"background_color": list(config.background_color),
		},
	}
	with manifest_path.open("w", encoding="utf-8") as handle:
		json.dump(data, handle, indent=2, sort_keys=True)


#============================================
def run_render(args: argparse.Namespace) -> RenderResult:
	"""
	Load the font, render the requested layout and save it.

	Args:
		args: Parsed argparse namespace.

	Returns:
		RenderResult of the render call.
	"""
	config = build_config(args)
	print(f"Font: {config.font_path} at {config.font_size}pt")
	print(f"Output: {args.output_path}")

	start_time = time.perf_counter()
	face = glyph_specimen.glyph_source.load_face(config.font_path, config.font_size)
	print(f"Glyphs in face: {face.num_glyphs}")

	if args.grid is not None:
		result = glyph_specimen.render.render_matrix(face, config, args.grid)
	elif args.text is not None:
		result = glyph_specimen.render.render_line(face, config, args.text)
	else:
		result = glyph_specimen.render.render_line(face, config, args.codes)
	render_end = time.perf_counter()
	if not result:
		return result

	output_path = pathlib.Path(args.output_path)
	save_image(result.image, output_path)
	print(f"Image written: {output_path} ({result.width}x{result.height})")
	if args.manifest_path:
		write_manifest(pathlib.Path(args.manifest_path), config, result)
		print(f"Manifest written: {args.manifest_path}")

	total_time = time.perf_counter() - start_time
	print(
		"Timing: render={:.2f}s total={:.2f}s".format(
			render_end - start_time,
			total_time,
		)
	)
	return result


#============================================
def main(argv: list[str] | None = None) -> int:
	"""
	Main entry point.

	Returns:
		Process exit status.
	"""
	args = parse_args(argv)
	try:
		result = run_render(args)
	except GlyphSpecimenError as error:
		print(f"Error: {error}")
		return 1
	if not result:
		return 1
	return 0
