"""
Diagnostic endpoints used to exercise single verification components.
"""

from ..domain.models import RawServiceResponse, RequestEnvelope, UploadFile
from .transport import Transport


class DiagnosticAPI:
    """Client for the ``/api/test`` endpoints (development and debugging only)."""

    def __init__(self, transport: Transport):
        self.transport = transport

    async def verify_nic_full(self, nic_image: UploadFile, face_image: UploadFile) -> RawServiceResponse:
        """Run the complete NIC pipeline against a document and a face image."""
        return await self.transport.send(
            RequestEnvelope(
                path="/api/test/verify-nic-full",
                method="POST",
                files={"nicImage": nic_image, "faceImage": face_image},
            )
        )

    async def extract_nic_number(self, nic_image: UploadFile) -> RawServiceResponse:
        """Extract the document number only."""
        return await self.transport.send(
            RequestEnvelope(path="/api/test/extract-nic-number", method="POST", files={"nicImage": nic_image})
        )

    async def validate_face(self, face_image: UploadFile) -> RawServiceResponse:
        """Validate the face image only."""
        return await self.transport.send(
            RequestEnvelope(path="/api/test/validate-face", method="POST", files={"faceImage": face_image})
        )
