"""BizBuz card rendering package -- vCard files, card pages and QR codes."""

from bizbuz.cards.html import card_url, initials, render_card_page, render_error_page
from bizbuz.cards.qr import qr_data_uri, render_qr_png
from bizbuz.cards.vcard import generate_profile_vcard, vcard_filename

__all__ = [
    "card_url",
    "initials",
    "render_card_page",
    "render_error_page",
    "qr_data_uri",
    "render_qr_png",
    "generate_profile_vcard",
    "vcard_filename",
]
