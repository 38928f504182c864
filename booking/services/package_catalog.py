"""
package_catalog.py
------------------
Publishing wedding packages.

A package is created in one go with all of its feature items; there is no
update endpoint. Images are optional and map onto features by position, so a
manager can upload fewer images than features but never more.
"""
import logging

from django.conf import settings
from django.db import transaction

from ..models import FeatureItem, Package
from .errors import BusinessRuleViolation, InvalidInput, Unauthorized
from .upload_store import discard_images, image_url, save_image, validate_image

logger = logging.getLogger(__name__)


def publish_package(manager, company_name, package_amount, contact_details, features, images=()):
    """
    Create a Package with its FeatureItems.

    Args:
        manager: Requester of the event manager publishing the package
        company_name: str
        package_amount: Decimal >= 0
        contact_details: {"email": str, "phone": str?, "address": str?}
        features: list of {"name": str, "description": str}, at least one
        images: uploaded files, images[i] belongs to features[i]

    Raises:
        Unauthorized: requester is not an event manager.
        BusinessRuleViolation: more images than features.
        InvalidInput: too many images, or an image has the wrong type or size.
    """
    if not manager.is_manager:
        raise Unauthorized("Access denied. admin role required")

    images = list(images or [])
    if len(images) > settings.PACKAGE_IMAGE_MAX_COUNT:
        raise InvalidInput(f"At most {settings.PACKAGE_IMAGE_MAX_COUNT} images can be uploaded", param="images")
    if len(images) > len(features):
        raise BusinessRuleViolation("Number of images cannot exceed number of features", param="images")
    for upload in images:
        validate_image(upload)

    # Files are not part of the transaction; anything stored before a
    # failure is removed again.
    saved = []
    try:
        with transaction.atomic():
            package = Package.objects.create(
                owner_id=manager.account_id,
                company_name=company_name.strip(),
                package_amount=package_amount,
                contact_email=contact_details["email"],
                contact_phone=contact_details.get("phone") or "",
                contact_address=contact_details.get("address") or "",
            )
            items = []
            for index, feature in enumerate(features):
                image = ""
                if index < len(images):
                    saved.append(save_image(images[index]))
                    image = image_url(saved[-1])
                items.append(FeatureItem(
                    package=package,
                    position=index,
                    name=feature["name"].strip(),
                    description=feature["description"].strip(),
                    image=image,
                ))
            FeatureItem.objects.bulk_create(items)
    except Exception:
        logger.warning("Publishing package for account %s failed, removing %d stored image(s)",
                       manager.account_id, len(saved))
        discard_images(saved)
        raise

    logger.info("Package %s published by account %s with %d feature(s), %d image(s)",
                package.pk, manager.account_id, len(features), len(images))
    return package
