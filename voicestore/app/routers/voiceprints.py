"""Voiceprint management routes."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, File, Form, Query, UploadFile, status

from voicestore.domain.exceptions import FileTooLargeError

from ..dependencies import VoiceprintServiceDep
from ..exception_handlers import create_message_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/voiceprints", tags=["voiceprints"])

DeviceIdQuery = Annotated[str | None, Query(alias="deviceId")]


@router.get("")
def list_voiceprints(
    service: VoiceprintServiceDep,
    device_id: DeviceIdQuery = None,
) -> list[dict[str, Any]]:
    """List one device's voiceprints, or every voiceprint."""
    if device_id is not None and device_id.strip():
        voiceprints = service.list(device_id)
    else:
        voiceprints = service.list_all()
    return [vp.to_dict() for vp in voiceprints]


@router.get("/export")
def export_voiceprints(
    service: VoiceprintServiceDep,
    device_id: DeviceIdQuery = None,
) -> dict[str, Any]:
    """Export one device's voiceprints, or all of them."""
    return service.export(device_id).to_dict()


@router.get("/statistics")
def voiceprint_statistics(service: VoiceprintServiceDep) -> dict[str, Any]:
    """Get voiceprint counts per device."""
    return service.statistics().to_dict()


@router.get("/{device_id}")
def list_device_voiceprints(
    device_id: str,
    service: VoiceprintServiceDep,
) -> list[dict[str, Any]]:
    """List a device's voiceprints."""
    voiceprints = service.list(device_id)
    logger.info(f"Device {device_id} has {len(voiceprints)} voiceprints")
    return [vp.to_dict() for vp in voiceprints]


@router.post("/{device_id}", status_code=status.HTTP_201_CREATED)
def add_voiceprint(
    device_id: str,
    service: VoiceprintServiceDep,
    file: Annotated[UploadFile, File()],
    name: Annotated[str | None, Form()] = None,
    description: Annotated[str | None, Form()] = None,
) -> dict[str, Any]:
    """Upload a voice sample for a device."""
    logger.info(f"Uploading voiceprint file for device {device_id}: {file.filename}")
    # Never buffer more than one byte past the limit
    max_file_size = service.validation_gate.max_file_size
    if file.size is not None and file.size > max_file_size:
        raise FileTooLargeError(file.size, max_file_size)
    data = file.file.read(max_file_size + 1)
    voiceprint = service.add(
        device_id,
        data,
        content_type=file.content_type,
        original_file_name=file.filename,
        name=name,
        description=description,
    )
    return voiceprint.to_dict()


@router.delete("/{device_id}/{voiceprint_id}")
def delete_voiceprint(
    device_id: str,
    voiceprint_id: str,
    service: VoiceprintServiceDep,
) -> dict[str, Any]:
    """Delete a voiceprint and its file."""
    service.delete(device_id, voiceprint_id)
    return create_message_response(True, "Voiceprint deleted")
