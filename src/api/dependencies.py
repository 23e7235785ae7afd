"""API dependency injection."""

import logging
from typing import Optional

from src.carrier_ip import CarrierClassifier, get_default_classifier

logger = logging.getLogger(__name__)

# Global instances (lazily initialized)
_classifier: Optional[CarrierClassifier] = None


def get_classifier() -> CarrierClassifier:
    """Get CarrierClassifier instance."""
    global _classifier

    if _classifier is not None:
        return _classifier

    _classifier = get_default_classifier()
    return _classifier


def set_classifier(classifier: Optional[CarrierClassifier]) -> None:
    """Replace the classifier instance (None restores the default on next use)."""
    global _classifier
    _classifier = classifier


def check_classifier_health() -> dict:
    """Report the loaded carrier table."""
    classifier = get_classifier()
    return {
        "status": "up",
        "strict_octets": classifier.strict_octets,
        "table": classifier.table.summary(),
    }


def cleanup():
    """Drop cached instances on shutdown."""
    global _classifier
    _classifier = None
    logger.info("Released classifier")
