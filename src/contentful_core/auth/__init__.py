"""Authentication for contentful_core.

All three APIs authenticate with a bearer token, applied by
:class:`BearerAuth` at the transport layer.
"""

from contentful_core.auth.bearer import BearerAuth

__all__ = ["BearerAuth"]
