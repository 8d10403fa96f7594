"""
Glyph lookup through FreeType and composition normalization.
"""

# Standard Library
import dataclasses
import pathlib

# PIP3 modules
import freetype

# local repo modules
import glyph_specimen.config


ResourceError = glyph_specimen.config.ResourceError
InputError = glyph_specimen.config.InputError

ONE_64TH_POINT = glyph_specimen.config.ONE_64TH_POINT
RESOLUTION = glyph_specimen.config.RESOLUTION


@dataclasses.dataclass(frozen=True)
class GlyphBitmap:
	code: int
	width: int
	rows: int
	left: int
	top: int
	h_advance: float
	pixels: bytes
	bbox: tuple[int, int, int, int]

	@property
	def is_blank(self) -> bool:
		return self.width == 0 or self.rows == 0

	@property
	def bbox_width(self) -> int:
		return self.bbox[2] - self.bbox[0]

	@property
	def bbox_height(self) -> int:
		return self.bbox[3] - self.bbox[1]


@dataclasses.dataclass(frozen=True)
class TextComposition:
	text: str


@dataclasses.dataclass(frozen=True)
class IdentifierComposition:
	codes: tuple[int, ...]


#============================================
class FreetypeFace:
	"""
	A sized FreeType face that hands out GlyphBitmap values.
	"""

	def __init__(self, face: freetype.Face, font_path: str, size: int):
		self.face = face
		self.font_path = font_path
		self.size = size

	@property
	def num_glyphs(self) -> int:
		return self.face.num_glyphs

	@property
	def family_name(self) -> str:
		name = self.face.family_name
		if isinstance(name, bytes):
			return name.decode("utf-8", "replace")
		return name or ""

	def map_char_to_glyph(self, codepoint: int) -> int:
		return self.face.get_char_index(codepoint)

	def rasterize(self, code: int) -> GlyphBitmap:
		"""
		Rasterize one glyph without hinting.

		Args:
			code: Glyph identifier.

		Returns:
			GlyphBitmap with its control box in device pixels.
		"""
		try:
			self.face.load_glyph(code, freetype.FT_LOAD_NO_HINTING)
			slot = self.face.glyph
			cbox = slot.get_glyph().get_cbox(freetype.FT_GLYPH_BBOX_PIXELS)
			slot.render(freetype.FT_RENDER_MODE_NORMAL)
		except freetype.FT_Exception as error:
			raise ResourceError(f"cannot rasterize glyph {code} from {self.font_path}: {error}") from error
		bitmap = slot.bitmap
		return GlyphBitmap(
			code=code,
			width=bitmap.width,
			rows=bitmap.rows,
			left=int(slot.bitmap_left),
			top=int(slot.bitmap_top),
			h_advance=slot.advance.x / float(ONE_64TH_POINT),
			pixels=pack_rows(bitmap.buffer, bitmap.width, bitmap.rows, bitmap.pitch),
			bbox=(cbox.xMin, cbox.yMin, cbox.xMax, cbox.yMax),
		)


#============================================
def pack_rows(buffer: list[int], width: int, rows: int, pitch: int) -> bytes:
	"""
	Drop the row padding FreeType adds when pitch exceeds width.

	Args:
		buffer: Raw bitmap buffer.
		width: Pixels per row.
		rows: Row count.
		pitch: Bytes per row in the buffer.

	Returns:
		Row-major bytes of length width * rows.
	"""
	pitch = abs(pitch)
	if pitch == width:
		return bytes(buffer[:width * rows])
	packed = bytearray()
	for row in range(rows):
		start = row * pitch
		packed.extend(buffer[start:start + width])
	return bytes(packed)


#============================================
def load_face(font_path: str, size: int) -> FreetypeFace:
	"""
	Open a font and set its point size.

	Args:
		font_path: Font file path.
		size: Point size at 72 dpi.

	Returns:
		FreetypeFace ready for rasterizing.
	"""
	path = pathlib.Path(font_path)
	if not path.is_file():
		raise ResourceError(f"font not found: {font_path}")
	try:
		face = freetype.Face(str(path))
	except (freetype.FT_Exception, OSError) as error:
		raise ResourceError(f"cannot load font {font_path}: {error}") from error
	try:
		face.select_charmap(freetype.FT_ENCODING_UNICODE)
	except freetype.FT_Exception as error:
		raise ResourceError(f"no unicode charmap in {font_path}: {error}") from error
	try:
		face.set_char_size(0, size * ONE_64TH_POINT, RESOLUTION, RESOLUTION)
	except freetype.FT_Exception as error:
		raise ResourceError(f"cannot set size {size} for {font_path}: {error}") from error
	return FreetypeFace(face, str(path), size)


#============================================
def _is_code(value: object) -> bool:
	return isinstance(value, int) and not isinstance(value, bool) and value >= 0


#============================================
def normalize_composition(composition: tuple) -> TextComposition | IdentifierComposition:
	"""
	Decide once whether a call carries text or glyph identifiers.

	A single string is text, a single list or tuple holds identifiers,
	and any other arguments are identifiers given one by one.

	Args:
		composition: Positional arguments of the render call.

	Returns:
		TextComposition or IdentifierComposition.
	"""
	if len(composition) == 1:
		first = composition[0]
		if isinstance(first, str):
			return TextComposition(first)
		if isinstance(first, (list, tuple)):
			composition = tuple(first)
	for value in composition:
		if not _is_code(value):
			raise InputError(f"unsupported composition element: {value!r}")
	return IdentifierComposition(tuple(composition))


#============================================
def glyph_codes_from(face, composition: TextComposition | IdentifierComposition) -> list[int]:
	"""
	Turn a composition into glyph identifiers.

	Args:
		face: Face providing map_char_to_glyph.
		composition: Normalized composition.

	Returns:
		Glyph identifiers in composition order.
	"""
	if isinstance(composition, TextComposition):
		return [face.map_char_to_glyph(ord(char)) for char in composition.text]
	return list(composition.codes)


#============================================
def resolve_glyphs(face, codes: list[int]) -> list[GlyphBitmap]:
	return [face.rasterize(code) for code in codes]
