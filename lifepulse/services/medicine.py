"""
Medicine package analysis.

The service has no image recognition; every photo gets the same educational
guidance, pointing the user to the label and their pharmacist.
"""

import logging

logger = logging.getLogger(__name__)


def analyze_medicine(image_base64: str) -> dict:
    """Returns the standard analysis for a submitted package photo."""
    logger.info(f"Medicine analysis requested ({len(image_base64)} bytes of image data).")
    return {
        "medicine_name": "Medicine Analysis",
        "dosage": "Please consult your healthcare provider for proper dosage",
        "purpose": "Automatic identification of specific medications is not available",
        "side_effects": [
            "Always read your medication label carefully",
            "Consult your healthcare provider for information about your specific medication",
        ],
        "warnings": [
            "Never rely solely on automated tools for medication information",
            "Always consult your doctor or pharmacist for proper medical advice",
            "This feature is for educational purposes only",
        ],
    }
