"""
Shared configuration, constants and result types.
"""

# Standard Library
import dataclasses

# PIP3 modules
import PIL.Image


ONE_64TH_POINT = 64
RESOLUTION = 72

DEFAULT_FONT_SIZE = 36
DEFAULT_LEFT_MARGIN = 6
DEFAULT_TOP_MARGIN = 70

DEFAULT_FOREGROUND_COLOR = (0, 0, 0, 255)
DEFAULT_BACKGROUND_COLOR = (255, 255, 255, 255)
DIVIDER_COLOR = (128, 128, 128, 255)


#============================================
class GlyphSpecimenError(Exception):
	"""
	Base class for rendering errors.
	"""


class ConfigurationError(GlyphSpecimenError):
	"""
	Render settings are incomplete (no width, no face, no advances).
	"""


class ResourceError(GlyphSpecimenError):
	"""
	A font could not be loaded or sized.
	"""


class InputError(GlyphSpecimenError, ValueError):
	"""
	A composition has a shape that is neither text nor identifiers.
	"""


@dataclasses.dataclass(frozen=True)
class RenderConfig:
	font_path: str | None = None
	font_size: int = DEFAULT_FONT_SIZE
	image_width: int | None = None
	h_advance: float | None = None
	v_advance: int | None = None
	items_per_line: int | None = None
	top_margin: int = DEFAULT_TOP_MARGIN
	left_margin: int = DEFAULT_LEFT_MARGIN
	foreground_color: tuple[int, int, int, int] = DEFAULT_FOREGROUND_COLOR
	background_color: tuple[int, int, int, int] = DEFAULT_BACKGROUND_COLOR
	draw_lines: bool = True
	verbose: bool = False


@dataclasses.dataclass(frozen=True)
class GlyphPlacement:
	code: int
	x: int
	y: int
	width: int
	rows: int
	cropped: bool = False


@dataclasses.dataclass(frozen=True)
class DividerLine:
	x0: int
	y0: int
	x1: int
	y1: int


@dataclasses.dataclass
class RenderResult:
	success: bool
	image: PIL.Image.Image | None = None
	glyph_codes: list[int] = dataclasses.field(default_factory=list)
	width: int = 0
	height: int = 0
	lines: int = 0
	placements: list[GlyphPlacement] = dataclasses.field(default_factory=list)
	dividers: list[DividerLine] = dataclasses.field(default_factory=list)
	error: GlyphSpecimenError | None = None

	def __bool__(self) -> bool:
		return self.success


#============================================
def failed_result(error: GlyphSpecimenError, verbose: bool = False) -> RenderResult:
	"""
	Build the result for a render call that could not start.

	Args:
		error: Why the render could not start.
		verbose: Print the problem when True.

	Returns:
		Unsuccessful RenderResult.
	"""
	if verbose:
		print(f"Render skipped: {error}")
	return RenderResult(success=False, error=error)
