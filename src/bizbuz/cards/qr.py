"""QR code rendering for card URLs.

Wraps the ``qrcode`` library (Pillow backend) to produce square PNGs of an
exact pixel size in the Planet Nine palette, either as raw bytes for the
``/qr`` endpoint or as a data URI for embedding in the card page.
"""

from __future__ import annotations

import base64
import io

import qrcode
import qrcode.constants
from PIL import Image
from qrcode.exceptions import DataOverflowError

from bizbuz.errors import QRCodeError

# Planet Nine green on dark
QR_FOREGROUND = "#10b981"
QR_BACKGROUND = "#0a001a"
# Background of the QR embedded in the card page, matches the card panel
QR_CARD_BACKGROUND = "#1a0033"


def render_qr_png(
    data: str,
    *,
    size: int = 300,
    margin: int = 2,
    fill_color: str = QR_FOREGROUND,
    back_color: str = QR_BACKGROUND,
) -> bytes:
    """Render ``data`` as a ``size`` x ``size`` PNG QR code.

    Args:
        data: Text to encode (usually a card URL).
        size: Output width and height in pixels.
        margin: Quiet zone around the symbol, in modules.
        fill_color: Module color.
        back_color: Background color.

    Returns:
        Raw PNG bytes.

    Raises:
        QRCodeError: If the data does not fit in a QR symbol.
    """
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=1,
        border=margin,
    )
    qr.add_data(data)
    try:
        qr.make(fit=True)
    except DataOverflowError as exc:
        raise QRCodeError(f"Data too long for a QR code ({len(data)} chars)") from exc

    # Render at the largest whole-pixel module size that fits, then snap to
    # the exact requested size.
    modules = qr.modules_count + 2 * margin
    qr.box_size = max(1, size // modules)
    img = qr.make_image(fill_color=fill_color, back_color=back_color).get_image()
    img = img.convert("RGB")
    if img.size != (size, size):
        img = img.resize((size, size), Image.NEAREST)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def qr_data_uri(data: str, **kwargs) -> str:
    """Render a QR code and return it as a ``data:image/png;base64,...`` URI.

    Keyword arguments are passed through to :func:`render_qr_png`.
    """
    png = render_qr_png(data, **kwargs)
    return "data:image/png;base64," + base64.b64encode(png).decode("ascii")
