"""
API Namespaces - Organized endpoint groups
"""

import logging

from flask import current_app, request
from flask_restx import Namespace, Resource

from catalog_import.api.v1.models import (
    ALL_MODELS,
    channel_import_request,
    duplicate_check_request,
    duplicate_check_response,
    error_response,
    import_result_response,
    source_import_request,
    sources_response,
    video_import_request,
)
from catalog_import.application.import_service import ImportService
from catalog_import.domain.content_import import (
    DEFAULT_CHANNEL_LIMIT,
    ChannelImportRequest,
    ImportBySourceTypeRequest,
    SourceType,
    VideoImportRequest,
)
from catalog_import.domain.errors import (
    CatalogStoreError,
    ErrorCategory,
    InvalidRequestError,
    categorize_domain_error,
    create_error_response,
)

logger = logging.getLogger(__name__)

# =============================================================================
# Import Namespace - Content import operations
# =============================================================================

import_ns = Namespace("import", description="Content import operations")

for _model in ALL_MODELS:
    import_ns.add_model(_model.name, _model)


def _import_service() -> ImportService:
    return current_app.container.resolve(ImportService)


def _payload() -> dict:
    return request.get_json(silent=True) or {}


def _import_video():
    data = _payload()
    try:
        video_request = VideoImportRequest(
            url=(data.get("url") or "").strip(), category_id=data.get("categoryId")
        )
    except InvalidRequestError as e:
        return create_error_response(ErrorCategory.INVALID_REQUEST, str(e), status_code=400)

    result = _import_service().import_video(video_request)
    return result.to_dict(), 200


@import_ns.route("/video")
class VideoImport(Resource):
    """Single item import, platform detected from the URL"""

    @import_ns.doc("import_video")
    @import_ns.expect(video_import_request, validate=True)
    @import_ns.response(200, "Import attempted", import_result_response)
    @import_ns.response(400, "Bad Request", error_response)
    def post(self):
        """
        Import a single video from any supported platform

        The result's ``success`` flag is false when no adapter matched the URL
        or the item could not be fetched.
        """
        return _import_video()


@import_ns.route("/youtube/video")
class YouTubeVideoImport(Resource):
    """Single YouTube video import"""

    @import_ns.doc("import_youtube_video")
    @import_ns.expect(video_import_request, validate=True)
    @import_ns.response(200, "Import attempted", import_result_response)
    @import_ns.response(400, "Bad Request", error_response)
    def post(self):
        """Import a single video from YouTube by URL"""
        return _import_video()


@import_ns.route("/youtube/channel")
class YouTubeChannelImport(Resource):
    """YouTube channel import"""

    @import_ns.doc("import_youtube_channel")
    @import_ns.expect(channel_import_request, validate=True)
    @import_ns.response(200, "Import attempted", import_result_response)
    @import_ns.response(400, "Bad Request", error_response)
    def post(self):
        """
        Import the latest videos of a YouTube channel

        Imports up to ``limit`` videos (default 10, max 50). Duplicates are
        skipped; one video failing does not stop the others.
        """
        data = _payload()
        try:
            channel_request = ChannelImportRequest(
                channel_id=(data.get("channelId") or "").strip(),
                limit=data.get("limit", DEFAULT_CHANNEL_LIMIT),
                category_id=data.get("categoryId"),
            )
        except InvalidRequestError as e:
            return create_error_response(
                ErrorCategory.INVALID_REQUEST, str(e), status_code=400
            )

        result = _import_service().import_channel(SourceType.YOUTUBE, channel_request)
        return result.to_dict(), 200


@import_ns.route("/by-source")
class SourceTypeImport(Resource):
    """Import through an explicitly named source type"""

    @import_ns.doc("import_by_source_type")
    @import_ns.expect(source_import_request, validate=True)
    @import_ns.response(200, "Import attempted", import_result_response)
    @import_ns.response(400, "Bad Request", error_response)
    def post(self):
        """
        Import content by source type and URL

        Only single-item URLs are accepted here; use the channel endpoint
        for channel imports.
        """
        data = _payload()
        try:
            source_request = ImportBySourceTypeRequest(
                source_type=data.get("sourceType"),
                url=(data.get("url") or "").strip(),
                category_id=data.get("categoryId"),
                limit=data.get("limit"),
            )
        except InvalidRequestError as e:
            return create_error_response(
                ErrorCategory.INVALID_REQUEST, str(e), status_code=400
            )

        result = _import_service().import_by_source_type(source_request)
        return result.to_dict(), 200


@import_ns.route("/sources")
class SupportedSources(Resource):
    """Supported source types"""

    @import_ns.doc("get_supported_sources")
    @import_ns.response(200, "Success", sources_response)
    def get(self):
        """List the source types that have a registered importer"""
        source_types = _import_service().get_supported_source_types()
        return {"supportedSources": [source_type.value for source_type in source_types]}, 200


@import_ns.route("/check-duplicate")
class DuplicateCheck(Resource):
    """Catalog duplicate check"""

    @import_ns.doc("check_duplicate")
    @import_ns.expect(duplicate_check_request, validate=True)
    @import_ns.response(200, "Success", duplicate_check_response)
    @import_ns.response(400, "Bad Request", error_response)
    @import_ns.response(503, "Catalog Unavailable", error_response)
    def post(self):
        """Check whether content with an external ID and source type already exists"""
        data = _payload()
        external_id = (data.get("externalId") or "").strip()
        source_type = data.get("sourceType")

        if not external_id or not source_type:
            return create_error_response(
                ErrorCategory.INVALID_REQUEST,
                "externalId and sourceType are required",
                status_code=400,
            )

        try:
            source_type = SourceType.parse(source_type)
            exists = _import_service().check_duplicate(external_id, source_type)
        except InvalidRequestError as e:
            return create_error_response(
                ErrorCategory.INVALID_REQUEST, str(e), status_code=400
            )
        except CatalogStoreError as e:
            logger.error(f"Duplicate check failed: {e}")
            return create_error_response(
                categorize_domain_error(e), str(e), status_code=503
            )

        return {
            "exists": exists,
            "externalId": external_id,
            "sourceType": source_type.value,
        }, 200
