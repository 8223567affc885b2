"""HTML renderer for the business card page and the error page.

The card page is a single self-contained document: inline styles, an
embedded QR code as a data URI, a Save Contact link to the vCard endpoint
and a Share button.  Every profile value is HTML-escaped before it is
interpolated; the static markup is not.
"""

from __future__ import annotations

import html
import re
from urllib.parse import quote

from bizbuz.cards.qr import QR_CARD_BACKGROUND, QR_FOREGROUND, qr_data_uri
from bizbuz.profiles import Profile

# Public host printed into the embedded QR code, independent of the host
# that served the request.
CARD_BASE_URL = "https://bizbuz.planetnine.app"

_SCHEME_PREFIX = re.compile(r"^https?://")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def escape(value: str | None) -> str:
    """HTML-escape a value; None and empty strings become ``""``."""
    if not value:
        return ""
    return html.escape(str(value), quote=True)


def initials(name: str | None) -> str:
    """First letter of each space-separated word, at most two, uppercased."""
    if not name:
        return "?"
    return "".join(word[:1] for word in name.split(" "))[:2].upper()


def card_url(identifier: str) -> str:
    """Canonical public URL of a card, as encoded in the embedded QR code."""
    return f"{CARD_BASE_URL}/card/{identifier}"


def display_url(url: str) -> str:
    """Strip a leading ``http://`` or ``https://`` for display."""
    return _SCHEME_PREFIX.sub("", url)


# ---------------------------------------------------------------------------
# Static assets
# ---------------------------------------------------------------------------

_CARD_STYLES = """
        * { margin: 0; padding: 0; box-sizing: border-box; }

        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: linear-gradient(135deg, #0a001a 0%, #1a0033 50%, #0a001a 100%);
            min-height: 100vh;
            display: flex;
            flex-direction: column;
            align-items: center;
            justify-content: center;
            padding: 20px;
            color: white;
        }

        .card {
            background: rgba(255, 255, 255, 0.05);
            border: 1px solid rgba(16, 185, 129, 0.3);
            border-radius: 24px;
            padding: 40px;
            max-width: 400px;
            width: 100%;
            text-align: center;
            backdrop-filter: blur(10px);
            box-shadow: 0 0 40px rgba(16, 185, 129, 0.1), 0 0 80px rgba(139, 92, 246, 0.05);
            position: relative;
            overflow: hidden;
        }

        .card::before {
            content: '';
            position: absolute;
            top: -50%;
            left: -50%;
            width: 200%;
            height: 200%;
            background: radial-gradient(circle, rgba(16, 185, 129, 0.1) 0%, transparent 50%);
            animation: pulse 4s ease-in-out infinite;
        }

        @keyframes pulse {
            0%, 100% { opacity: 0.5; transform: scale(1); }
            50% { opacity: 1; transform: scale(1.1); }
        }

        .card-content { position: relative; z-index: 1; }

        .avatar {
            width: 100px;
            height: 100px;
            border-radius: 50%;
            background: linear-gradient(135deg, #10b981 0%, #059669 100%);
            margin: 0 auto 20px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 40px;
            font-weight: bold;
            color: white;
            box-shadow: 0 0 30px rgba(16, 185, 129, 0.4);
        }

        .name {
            font-size: 28px;
            font-weight: 700;
            margin-bottom: 8px;
            background: linear-gradient(135deg, #10b981 0%, #a78bfa 100%);
            -webkit-background-clip: text;
            -webkit-text-fill-color: transparent;
            background-clip: text;
        }

        .title { font-size: 16px; color: rgba(167, 139, 250, 0.9); margin-bottom: 4px; }
        .company { font-size: 14px; color: rgba(255, 255, 255, 0.6); margin-bottom: 20px; }

        .bio {
            font-size: 14px;
            color: rgba(255, 255, 255, 0.7);
            line-height: 1.6;
            margin-bottom: 24px;
            font-style: italic;
        }

        .contact-info { text-align: left; margin-bottom: 24px; }

        .contact-item {
            display: flex;
            align-items: center;
            gap: 12px;
            padding: 10px 0;
            border-bottom: 1px solid rgba(255, 255, 255, 0.1);
            color: rgba(255, 255, 255, 0.8);
            text-decoration: none;
            transition: color 0.2s;
        }

        .contact-item:hover { color: #10b981; }
        .contact-item:last-child { border-bottom: none; }
        .contact-icon { width: 20px; text-align: center; color: #10b981; }

        .qr-section {
            margin-top: 24px;
            padding-top: 24px;
            border-top: 1px solid rgba(255, 255, 255, 0.1);
        }

        .qr-code {
            background: #1a0033;
            padding: 10px;
            border-radius: 12px;
            display: inline-block;
            margin-bottom: 12px;
        }

        .qr-code img { display: block; }
        .qr-label { font-size: 12px; color: rgba(255, 255, 255, 0.5); }

        .actions { display: flex; gap: 12px; margin-top: 24px; }

        .btn {
            flex: 1;
            padding: 14px 20px;
            border: none;
            border-radius: 12px;
            font-size: 14px;
            font-weight: 600;
            cursor: pointer;
            transition: all 0.2s;
            text-decoration: none;
            display: flex;
            align-items: center;
            justify-content: center;
            gap: 8px;
        }

        .btn-primary {
            background: linear-gradient(135deg, #10b981 0%, #059669 100%);
            color: white;
            box-shadow: 0 4px 20px rgba(16, 185, 129, 0.3);
        }

        .btn-primary:hover { transform: translateY(-2px); box-shadow: 0 6px 30px rgba(16, 185, 129, 0.4); }

        .btn-secondary {
            background: rgba(255, 255, 255, 0.1);
            color: white;
            border: 1px solid rgba(255, 255, 255, 0.2);
        }

        .btn-secondary:hover { background: rgba(255, 255, 255, 0.15); }

        .footer { margin-top: 30px; text-align: center; color: rgba(255, 255, 255, 0.4); font-size: 12px; }
        .footer a { color: #10b981; text-decoration: none; }

        .particle {
            position: fixed;
            width: 4px;
            height: 4px;
            background: #10b981;
            border-radius: 50%;
            opacity: 0.3;
            animation: float 10s infinite;
        }

        @keyframes float {
            0%, 100% { transform: translateY(100vh) rotate(0deg); opacity: 0; }
            10% { opacity: 0.3; }
            90% { opacity: 0.3; }
            100% { transform: translateY(-100vh) rotate(720deg); opacity: 0; }
        }
"""

# navigator.share, then the clipboard, then a prompt the user copies from
_SHARE_SCRIPT = """
        async function shareCard(button) {
            const url = window.location.href;
            const title = button.dataset.shareTitle;

            if (navigator.share) {
                try {
                    await navigator.share({ title, url });
                } catch (err) {
                    copyToClipboard(url);
                }
            } else {
                copyToClipboard(url);
            }
        }

        function copyToClipboard(text) {
            if (!navigator.clipboard) {
                prompt('Copy this link:', text);
                return;
            }
            navigator.clipboard.writeText(text).then(() => {
                alert('Link copied to clipboard!');
            }).catch(() => {
                prompt('Copy this link:', text);
            });
        }
"""

_ERROR_STYLES = """
        body {
            font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;
            background: linear-gradient(135deg, #0a001a 0%, #1a0033 100%);
            color: white;
            display: flex;
            align-items: center;
            justify-content: center;
            min-height: 100vh;
            margin: 0;
            padding: 20px;
        }
        .error {
            background: rgba(255, 255, 255, 0.05);
            padding: 40px;
            border-radius: 20px;
            text-align: center;
            border: 1px solid rgba(239, 68, 68, 0.3);
        }
        h1 { color: #ef4444; margin-bottom: 16px; }
        p { color: rgba(255, 255, 255, 0.7); }
        a { color: #10b981; }
"""


# ---------------------------------------------------------------------------
# Card page
# ---------------------------------------------------------------------------


def _contact_items(profile: Profile) -> str:
    items: list[str] = []
    if profile.email:
        email = escape(profile.email)
        items.append(
            f'<a href="mailto:{email}" class="contact-item">'
            f'<span class="contact-icon">@</span><span>{email}</span></a>'
        )
    if profile.phone:
        phone = escape(profile.phone)
        items.append(
            f'<a href="tel:{phone}" class="contact-item">'
            f'<span class="contact-icon">#</span><span>{phone}</span></a>'
        )
    if profile.website:
        items.append(
            f'<a href="{escape(profile.website)}" target="_blank" class="contact-item">'
            f'<span class="contact-icon">~</span>'
            f"<span>{escape(display_url(profile.website))}</span></a>"
        )
    if profile.location:
        items.append(
            '<div class="contact-item">'
            f'<span class="contact-icon">*</span><span>{escape(profile.location)}</span></div>'
        )
    return "\n                ".join(items)


def render_card_page(
    profile: Profile,
    identifier: str,
    *,
    qr_image: str | None = None,
) -> str:
    """Render the business card page for a profile.

    Args:
        profile: The resolved profile.
        identifier: The identifier the card was requested under; used for
            the QR target and the Save Contact link.
        qr_image: Pre-rendered QR data URI.  If None, a 150px QR code of
            :func:`card_url` is generated.

    Returns:
        A complete HTML document.
    """
    if qr_image is None:
        qr_image = qr_data_uri(
            card_url(identifier),
            size=150,
            margin=1,
            fill_color=QR_FOREGROUND,
            back_color=QR_CARD_BACKGROUND,
        )

    page_title = escape(profile.name or "BizBuz")
    description = f"{escape(profile.title)} at {escape(profile.company or 'Planet Nine')}"
    share_title = escape(f"{profile.name or 'Contact'} - Business Card")
    vcard_href = escape(f"/vcard/{quote(identifier, safe='')}")

    title_block = f'<p class="title">{escape(profile.title)}</p>' if profile.title else ""
    company_block = f'<p class="company">{escape(profile.company)}</p>' if profile.company else ""
    bio_block = f'<p class="bio">"{escape(profile.bio)}"</p>' if profile.bio else ""

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{page_title} - Digital Business Card</title>
    <meta name="description" content="{description}">
    <style>{_CARD_STYLES}    </style>
</head>
<body>
    <div class="particle" style="left: 10%; animation-delay: 0s;"></div>
    <div class="particle" style="left: 30%; animation-delay: 2s;"></div>
    <div class="particle" style="left: 50%; animation-delay: 4s;"></div>
    <div class="particle" style="left: 70%; animation-delay: 6s;"></div>
    <div class="particle" style="left: 90%; animation-delay: 8s;"></div>

    <div class="card">
        <div class="card-content">
            <div class="avatar">{escape(initials(profile.name))}</div>

            <h1 class="name">{escape(profile.name or "Anonymous")}</h1>
            {title_block}
            {company_block}
            {bio_block}

            <div class="contact-info">
                {_contact_items(profile)}
            </div>

            <div class="qr-section">
                <div class="qr-code">
                    <img src="{qr_image}" alt="QR Code" width="150" height="150">
                </div>
                <p class="qr-label">Scan to save contact</p>
            </div>

            <div class="actions">
                <a href="{vcard_href}" class="btn btn-primary" download>
                    Save Contact
                </a>
                <button class="btn btn-secondary" data-share-title="{share_title}" onclick="shareCard(this)">
                    Share
                </button>
            </div>
        </div>
    </div>

    <div class="footer">
        <p>Powered by <a href="https://planetnine.app">Planet Nine</a></p>
    </div>

    <script>{_SHARE_SCRIPT}    </script>
</body>
</html>"""


# ---------------------------------------------------------------------------
# Error page
# ---------------------------------------------------------------------------


def render_error_page(message: str) -> str:
    """Render the error page with an escaped message and a link home."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Error - BizBuz</title>
    <style>{_ERROR_STYLES}    </style>
</head>
<body>
    <div class="error">
        <h1>Oops!</h1>
        <p>{escape(message)}</p>
        <p style="margin-top: 20px;"><a href="/">Back to BizBuz</a></p>
    </div>
</body>
</html>"""
