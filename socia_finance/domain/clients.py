"""Client purchase-cycle prediction and cross-sell suggestions"""

from datetime import date
from typing import Dict, List, Optional, Tuple
from socia_finance.domain.models import ClientCycleProfile
from socia_finance.domain.policy import DUE_SOON_WINDOW_DAYS
from socia_finance.utils.date_utils import consecutive_gaps, days_between
from socia_finance.utils.numbers import round_half_up

FOOTWEAR_MATCH = "Bolso, Blusa o Jeans"
OUTFIT_MATCH = "Botines, Tacones o Bolso"
OUTERWEAR_MATCH = "Jeans, Botas o Blusa"
ACCESSORY_MATCH = "Blusa o Vestido"
INTIMATES_MATCH = "Fragancia o Maquillaje"
MENSWEAR_MATCH = "Tenis o Chamarra"

GENERIC_SUGGESTION = "algo nuevo de temporada"

COMPLEMENTS: Dict[str, str] = {
    "Tenis": FOOTWEAR_MATCH,
    "Botines": FOOTWEAR_MATCH,
    "Botas": FOOTWEAR_MATCH,
    "Tacones": FOOTWEAR_MATCH,
    "Sandalias": FOOTWEAR_MATCH,
    "Flats/Zapatillas": FOOTWEAR_MATCH,
    "Mocasines/Loafers": FOOTWEAR_MATCH,
    "Zapato casual": FOOTWEAR_MATCH,
    "Infantil": FOOTWEAR_MATCH,
    "Jeans": OUTFIT_MATCH,
    "Blusa/Top": OUTFIT_MATCH,
    "Vestido": OUTFIT_MATCH,
    "Falda": OUTFIT_MATCH,
    "Chamarra/Chaqueta": OUTERWEAR_MATCH,
    "Suéter/Hoodie": OUTERWEAR_MATCH,
    "Bolso/Mochila": ACCESSORY_MATCH,
    "Bisutería/Accesorios": ACCESSORY_MATCH,
    "Reloj": ACCESSORY_MATCH,
    "Lencería": INTIMATES_MATCH,
    "Pijama": INTIMATES_MATCH,
    "Traje de baño": INTIMATES_MATCH,
    "Playera": MENSWEAR_MATCH,
    "Jeans hombre": MENSWEAR_MATCH,
    "Bermuda/Short": MENSWEAR_MATCH,
}


def compute_cycle(
    sorted_purchase_dates: List[date],
    today: Optional[date] = None,
) -> Optional[ClientCycleProfile]:
    """
    Predict when a client is expected to buy again.

    Requirements:
    - At least 2 purchase dates, otherwise there is nothing to predict (None)
    - Average gap is the rounded mean of consecutive day differences
    - days_until_next is signed; negative means the client is overdue

    Example:
        [2024-01-01, 2024-01-15] -> average gap 14 days
    """
    if len(sorted_purchase_dates) < 2:
        return None

    if today is None:
        today = date.today()

    gaps = consecutive_gaps(sorted_purchase_dates)
    average_gap_days = round_half_up(sum(gaps) / len(gaps))
    days_since_last = days_between(sorted_purchase_dates[-1], today)

    return ClientCycleProfile(
        average_gap_days=average_gap_days,
        days_since_last=days_since_last,
        days_until_next=average_gap_days - days_since_last,
    )


def is_due_soon(profile: Optional[ClientCycleProfile]) -> bool:
    """Client is within the +/- window of the expected next purchase"""
    if profile is None or profile.average_gap_days <= 0:
        return False
    return -DUE_SOON_WINDOW_DAYS <= profile.days_until_next <= DUE_SOON_WINDOW_DAYS


def due_soon_clients(
    dates_by_client: Dict[str, List[date]],
    today: Optional[date] = None,
) -> List[Tuple[str, ClientCycleProfile]]:
    """Clients to contact now, each with a cycle profile"""
    results = []
    for client_id, dates in dates_by_client.items():
        profile = compute_cycle(sorted(dates), today)
        if is_due_soon(profile):
            results.append((client_id, profile))
    return results


def suggest_complement(last_category: str) -> str:
    """Complementary categories to offer after a purchase in last_category"""
    return COMPLEMENTS.get(last_category, GENERIC_SUGGESTION)


def last_category_by_client(
    items: List[Tuple[str, date, str]],
) -> Dict[str, Tuple[str, date]]:
    """
    Latest purchased category per client.

    Args:
        items: (client_id, purchase_date, category) for every sale item
    """
    latest: Dict[str, Tuple[str, date]] = {}
    for client_id, purchase_date, category in items:
        if client_id not in latest or purchase_date > latest[client_id][1]:
            latest[client_id] = (category, purchase_date)
    return latest
