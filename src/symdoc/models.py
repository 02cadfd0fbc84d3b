"""Data models for symdoc."""

from urllib.parse import urljoin

from pydantic import BaseModel, ConfigDict, Field, field_validator

from symdoc.exceptions import ValidationError
from symdoc.utils import extract_fragment

# =============================================================================
# Symbol Identity
# =============================================================================

# Sphinx inventory roles that map to a documented Python symbol
ALLOWED_ROLES: frozenset[str] = frozenset(
    {
        "py:function",
        "py:method",
        "py:attribute",
        "py:data",
        "py:class",
        "py:property",
        "py:module",
        "py:exception",
    }
)


def resolve_uri(uri: str, name: str) -> str:
    """Expand the ``$`` and ``%s`` shorthands inventory URIs use for the symbol name."""
    return uri.replace("$", name).replace("%s", name)


class SymbolIdentity(BaseModel):
    """Identity of one documented symbol, as resolved from a Sphinx inventory.

    Usage:
        item = SymbolIdentity.from_inventory(
            "numpy.linspace",
            "py:function",
            "reference/generated/numpy.linspace.html#$",
            base_url="https://numpy.org/doc/stable/",
            package="numpy",
        )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Fully-qualified dotted name (e.g., "numpy.linspace")
    name: str = Field(min_length=1)

    # Name without the package prefix (e.g., "linspace", "ndarray.any")
    short_name: str = Field(min_length=1)

    role: str

    # Canonical page URL, usually with a fragment naming the anchor
    url: str

    display_name: str

    @field_validator("role")
    @classmethod
    def _check_role(cls, value: str) -> str:
        if value not in ALLOWED_ROLES:
            raise ValueError(f"unsupported role {value!r}")
        return value

    @property
    def anchor(self) -> str | None:
        """Fragment of the canonical URL, or None."""
        return extract_fragment(self.url)

    @property
    def kind(self) -> str:
        """Role without its domain prefix (e.g., "function")."""
        return self.role.split(":", 1)[-1]

    @classmethod
    def from_inventory(
        cls,
        name: str,
        role: str,
        uri: str,
        base_url: str,
        display_name: str = "-",
        package: str | None = None,
    ) -> "SymbolIdentity":
        """Build an identity from the fields of one inventory line.

        Args:
            name: Fully-qualified symbol name.
            role: Inventory role (must be in ALLOWED_ROLES).
            uri: Inventory URI, possibly using ``$`` or ``%s`` for the name.
            base_url: Documentation root the URI is relative to.
            display_name: Inventory display name; ``-`` means "same as name".
            package: Package prefix stripped from name to form the short name.

        Returns:
            Resolved SymbolIdentity.

        Raises:
            ValidationError: If the name is empty or the role is not supported.
        """
        if not name.strip():
            raise ValidationError("Symbol name must not be empty", field="name", value=name)
        if role not in ALLOWED_ROLES:
            raise ValidationError(
                f"Unsupported role: {role}. Must be one of: {', '.join(sorted(ALLOWED_ROLES))}",
                field="role",
                value=role,
            )

        return cls(
            name=name,
            short_name=short_name_for(name, package),
            role=role,
            url=urljoin(base_url, resolve_uri(uri, name)),
            display_name=name if display_name == "-" else display_name,
        )


def short_name_for(name: str, package: str | None) -> str:
    """Strip ``package.`` from the front of a qualified name when present."""
    prefix = f"{package}." if package else ""
    if prefix and name.startswith(prefix) and len(name) > len(prefix):
        return name[len(prefix) :]
    return name


# =============================================================================
# Extracted Documentation
# =============================================================================


class FieldEntry(BaseModel):
    """One itemised parameter or return value."""

    model_config = ConfigDict(frozen=True)

    name: str

    # Declared type; multiple classifiers are comma-joined
    type: str | None = None

    description: str | None = None


class DocDetail(BaseModel):
    """Documentation extracted for one symbol.

    Every sequence mirrors document order. An instance with no signature and
    empty sequences means nothing could be extracted; it is not an error.
    """

    model_config = ConfigDict(frozen=True)

    signature: str | None = None
    description: tuple[str, ...] = ()
    parameters: tuple[FieldEntry, ...] = ()
    returns: tuple[FieldEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when no field carries any extracted data."""
        return not (self.signature or self.description or self.parameters or self.returns)
