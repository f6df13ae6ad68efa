"""
core/query/services/ec2.py - EC2 인스턴스/AMI 조회
"""

from __future__ import annotations

import logging
from typing import Any

from .helpers import strip_metadata

logger = logging.getLogger(__name__)


def query_instance(ec2: Any, value: str, filter_name: str = "instance-id") -> dict[str, Any] | None:
    """필터 하나로 EC2 인스턴스 조회

    Args:
        ec2: EC2 client
        value: 필터 값
        filter_name: describe_instances 필터 이름 (instance-id, private-ip-address, ip-address)

    Returns:
        Reservations가 하나 이상이면 describe_instances 응답, 아니면 None
    """
    response = ec2.describe_instances(Filters=[{"Name": filter_name, "Values": [value]}])
    if response.get("Reservations"):
        return strip_metadata(response)
    return None


def query_ami(ec2: Any, image_id: str) -> dict[str, Any] | None:
    """이미지 ID로 AMI 조회

    Returns:
        첫 번째 이미지 레코드, 없으면 None
    """
    response = ec2.describe_images(ImageIds=[image_id])
    images = response.get("Images") or []
    if not images:
        return None

    image = images[0]
    logger.debug(
        "이미지 발견 (owner=%s): %s, name=%s",
        image.get("OwnerId"),
        image.get("ImageId"),
        image.get("Name"),
    )
    logger.debug("Tags: %s", image.get("Tags", []))
    return image
