"""sileo_depiction — native Sileo depictions from package metadata."""

__all__ = [
    "__version__",
    "build",
    "create_depiction",
    "render_tab",
    "render_depiction",
    "validate_instance",
    "DetailsTab",
    "ChangesTab",
    "ContactTab",
]
__version__ = "0.1.0"

from sileo_depiction.api import (  # noqa: E402, F401
    render_depiction,
    render_tab,
    validate_instance,
)
from sileo_depiction.depiction import create_depiction  # noqa: E402, F401
from sileo_depiction.tabs import (  # noqa: E402, F401
    ChangesTab,
    ContactTab,
    DetailsTab,
    build,
)
