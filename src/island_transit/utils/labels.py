"""Display labels for service classes, directions and islands."""

SERVICE_CLASS_LABELS = {
    "first_class": "Première Classe",
    "second_class": "Deuxième Classe",
    "third_class": "Troisième Classe",
}

DIRECTION_LABELS = {
    "northbound": "Direction Nord",
    "southbound": "Direction Sud",
    "outbound": "Aller",
    "inbound": "Retour",
}

MAINLAND_ISLAND = "Grande-Terre"
LOYALTY_ISLANDS = ("Lifou", "Maré", "Ouvéa")
ISLE_OF_PINES = "Île des Pins"

# narrow no-break space, the French thousands separator
THOUSANDS_SEPARATOR = "\u202f"


def format_price(amount: int, currency: str = "XPF") -> str:
    """Format an amount with French digit grouping ("12 000 XPF")."""
    grouped = f"{amount:,}".replace(",", THOUSANDS_SEPARATOR)
    return f"{grouped} {currency}"


def service_class_label(service_class: str) -> str:
    """Human readable name of a service class."""
    return SERVICE_CLASS_LABELS.get(service_class, "Classe inconnue")


def direction_label(direction: str) -> str:
    """Human readable direction, the raw tag when it is not in the vocabulary."""
    return DIRECTION_LABELS.get(direction.lower(), direction)


def is_outer_island(island: str) -> bool:
    """Whether an island name designates one of the outer islands."""
    island_lower = island.lower()
    return any(
        name.lower() in island_lower for name in (*LOYALTY_ISLANDS, ISLE_OF_PINES)
    )
