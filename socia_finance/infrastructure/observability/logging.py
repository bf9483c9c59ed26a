"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "socia-finance"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_sale(
    request_id: str,
    user_id: str,
    purchase_id: str,
    amount: float,
    is_credit: bool,
    installments: int,
    duration_ms: float,
) -> None:
    """Log structured sale registration for analysis"""
    logging.info(
        "Sale recorded",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "sale_recorded",
            "purchase_id": purchase_id,
            "amount": amount,
            "sale_mode": "credit" if is_credit else "cash",
            "installments": installments,
            "duration_ms": duration_ms,
        },
    )


def log_goal_saved(request_id: str, user_id: str, target_amount: float, created: bool) -> None:
    logging.info(
        "Goal saved",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "goal_saved",
            "target_amount": target_amount,
            "created": created,
        },
    )
