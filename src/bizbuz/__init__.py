"""BizBuz -- digital business cards rendered from profile service records.

Top-level convenience re-exports::

    from bizbuz import Profile, ProfileResolver
    from bizbuz.cards import generate_profile_vcard, render_card_page
"""

__version__ = "0.1.0"

from bizbuz.profiles import Profile, ProfileResolver, SocialLinks, demo_profile

__all__ = ["__version__", "Profile", "ProfileResolver", "SocialLinks", "demo_profile"]
