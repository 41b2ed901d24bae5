import requests
from django.conf import settings
from urllib.parse import quote
import logging

from giftcards.models.security import Location


logger = logging.getLogger("services")

QR_CODE_URL = "https://api.qrserver.com/v1/create-qr-code/?size={size}x{size}&data={data}"


def lookup_location(ip_address: str, timeout: float = None):
    """
    Look up the approximate coordinates of an IP address.

    Args:
        ip_address (str): The public client address.
        timeout (float): Seconds to wait for the lookup service.

    Returns:
        Location: The coordinates if the service resolved them, None otherwise.
    """
    if not ip_address:
        return None

    url = settings.GEOLOCATION_URL
    if timeout is None:
        timeout = settings.GEOLOCATION_TIMEOUT

    try:
        response = requests.get(url.format(ip=ip_address), timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout:
        logger.warning("Geolocation lookup timed out for %s.", ip_address)
        return None
    except requests.exceptions.ConnectionError:
        logger.warning("Failed to connect to the geolocation service.")
        return None
    except requests.exceptions.RequestException as e:
        logger.warning("Geolocation lookup failed for %s: %s", ip_address, str(e))
        return None

    try:
        data = response.json()
    except ValueError:
        logger.warning("Geolocation service returned a non-JSON body for %s.", ip_address)
        return None

    latitude = data.get("lat", data.get("latitude"))
    longitude = data.get("lon", data.get("longitude"))
    if latitude is None or longitude is None:
        logger.info("Geolocation unavailable for %s: %s", ip_address, data.get("message", "no coordinates"))
        return None

    return Location(latitude=float(latitude), longitude=float(longitude))


def qr_code_url(code: str, size: int = 150) -> str:
    """Image URL of a QR code encoding `code`."""
    return QR_CODE_URL.format(size=size, data=quote(code, safe=""))
