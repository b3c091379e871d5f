"""
Font resolution for PDF export.

Latin-script languages use the built-in Helvetica family. Hindi, Bengali,
Chinese and Japanese need a Noto Sans face, fetched over HTTP on every
render call and embedded as a TrueType font. Fetch or parse failures fall
back to Helvetica; unsupported glyphs then render as missing boxes.
"""
import base64
import io
from dataclasses import dataclass, field
from typing import Mapping, Optional

import httpx
from reportlab.pdfbase.ttfonts import TTFont

from medsimplify.utils import get_logger, FontLoadError

logger = get_logger(__name__)

# Noto Sans faces for languages outside the Latin script
FONT_URLS: Mapping[str, str] = {
    "Hindi": "https://raw.githubusercontent.com/google/fonts/main/ofl/notosansdevanagari/NotoSansDevanagari-Regular.ttf",
    "Bengali": "https://raw.githubusercontent.com/google/fonts/main/ofl/notosansbengali/NotoSansBengali-Regular.ttf",
    "Chinese": "https://raw.githubusercontent.com/google/fonts/main/ofl/notosanssc/NotoSansSC-Regular.ttf",
    "Japanese": "https://raw.githubusercontent.com/google/fonts/main/ofl/notosansjp/NotoSansJP-Regular.ttf",
}

DEFAULT_FONT = "Helvetica"
DEFAULT_BOLD_FONT = "Helvetica-Bold"


@dataclass(frozen=True)
class FontAsset:
    """A fetched typeface, base64-encoded for embedding."""
    language: str
    font_name: str
    data_b64: str

    @property
    def data(self) -> bytes:
        return base64.b64decode(self.data_b64)

    def to_ttfont(self) -> TTFont:
        """Parse the payload into a reportlab TrueType font."""
        return TTFont(self.font_name, io.BytesIO(self.data))


@dataclass(frozen=True)
class FontManifest:
    """
    Fonts to use for one render.

    Built per call and never mutated. ``ttfont`` is set only when a remote
    face was fetched and parsed; bold reuses the regular face in that case.
    """
    font_name: str = DEFAULT_FONT
    bold_font_name: str = DEFAULT_BOLD_FONT
    asset: Optional[FontAsset] = None
    ttfont: Optional[TTFont] = field(default=None, compare=False, repr=False)

    @property
    def uses_remote_font(self) -> bool:
        return self.ttfont is not None


class FontResolver:
    """
    Resolves the font manifest for a report language.

    Nothing is cached between calls: each resolve of a non-Latin language
    performs exactly one HTTP GET.
    """

    def __init__(
        self,
        font_urls: Optional[Mapping[str, str]] = None,
        timeout: float = 20.0,
        default_font: str = DEFAULT_FONT,
        default_bold_font: str = DEFAULT_BOLD_FONT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.font_urls = dict(FONT_URLS if font_urls is None else font_urls)
        self.timeout = timeout
        self.default_font = default_font
        self.default_bold_font = default_bold_font
        self._transport = transport

    @staticmethod
    def font_name_for(language: str) -> str:
        return f"NotoSans{language}"

    def needs_remote_font(self, language: Optional[str]) -> bool:
        return bool(language) and language in self.font_urls

    def default_manifest(self) -> FontManifest:
        return FontManifest(font_name=self.default_font, bold_font_name=self.default_bold_font)

    async def fetch(self, language: str) -> FontAsset:
        """
        Download the face for ``language``.

        Raises:
            FontLoadError: no URL configured, transport error or non-2xx status
        """
        url = self.font_urls.get(language)
        if not url:
            raise FontLoadError(f"No font configured for {language}", language=language)

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.timeout,
                follow_redirects=True,
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise FontLoadError(
                f"Font download failed for {language}: {e}",
                language=language,
                details={"url": url},
            ) from e

        return FontAsset(
            language=language,
            font_name=self.font_name_for(language),
            data_b64=base64.b64encode(response.content).decode("ascii"),
        )

    async def resolve(self, language: Optional[str]) -> FontManifest:
        """
        Pick the fonts for a report language, falling back to the default
        family when the remote face cannot be fetched or parsed.
        """
        if not self.needs_remote_font(language):
            return self.default_manifest()

        try:
            asset = await self.fetch(language)
            try:
                ttfont = asset.to_ttfont()
            except Exception as e:
                raise FontLoadError(
                    f"Downloaded font for {language} is not a usable TrueType file: {e}",
                    language=language,
                ) from e
        except FontLoadError as e:
            logger.error(f"Failed to load font for {language}. Falling back to default. ({e.message})")
            return self.default_manifest()

        logger.info(f"Loaded custom font for {language}: {asset.font_name}")
        return FontManifest(
            font_name=asset.font_name,
            bold_font_name=asset.font_name,
            asset=asset,
            ttfont=ttfont,
        )
