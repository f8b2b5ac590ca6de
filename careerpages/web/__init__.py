"""HTTP surface for the careers site.

Run locally with ``careerpages serve`` or ``flask --app careerpages.web run``.
"""

from careerpages.web.app import create_app

__all__ = ["create_app"]
