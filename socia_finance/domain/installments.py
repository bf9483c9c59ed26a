"""Payment schedule generation for credit sales"""

from datetime import date, timedelta
from decimal import Decimal, ROUND_DOWN
from typing import List
from socia_finance.domain.models import Installment
from socia_finance.domain.policy import DEFAULT_INSTALLMENT_INTERVAL_DAYS

CENT = Decimal("0.01")


def generate_payment_schedule(
    total: float,
    num_installments: int,
    interval_days: int = DEFAULT_INSTALLMENT_INTERVAL_DAYS,
    start_date: date | None = None,
) -> List[Installment]:
    """
    Generate equal installments (abonos) for a sale on credit.

    Requirements:
    - Equal amounts rounded down to the cent
    - interval_days apart
    - Last installment absorbs the rounding remainder so the schedule sums
      to the sale total exactly

    Args:
        total: Client price of the sale
        num_installments: Number of payments agreed with the client
        interval_days: Days between payments (default 14)
        start_date: First due date (default: today + interval_days)

    Example:
        $1100.00 in 3 -> [$366.66, $366.66, $366.68]
    """
    if total <= 0 or num_installments < 1:
        return []

    if start_date is None:
        start_date = date.today() + timedelta(days=interval_days)

    total_dec = Decimal(str(total)).quantize(CENT)
    if total_dec <= 0:
        return []
    base_amount = (total_dec / num_installments).quantize(CENT, rounding=ROUND_DOWN)
    remainder = total_dec - base_amount * num_installments

    installments = []
    for i in range(num_installments):
        due_date = start_date + timedelta(days=i * interval_days)

        amount = base_amount + (remainder if i == num_installments - 1 else Decimal("0"))

        installments.append(Installment(payment_number=i + 1, due_date=due_date, amount=float(amount)))

    return installments
