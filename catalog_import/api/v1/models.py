"""
API Models for request/response validation and Swagger documentation
"""

from flask_restx import Model, fields

from catalog_import.domain.content_import import MAX_CHANNEL_LIMIT, SourceType

SOURCE_TYPES = [source_type.value for source_type in SourceType]

# =============================================================================
# Request Models
# =============================================================================

video_import_request = Model(
    "VideoImportRequest",
    {
        "url": fields.String(
            required=True,
            description="URL of the video to import",
            example="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        ),
        "categoryId": fields.String(
            required=False,
            description="Optional category UUID to assign to the imported video",
            example="3f2b8c1e-9a4d-4e7b-8c2a-1d5e6f7a8b9c",
        ),
    },
)

channel_import_request = Model(
    "ChannelImportRequest",
    {
        "channelId": fields.String(
            required=True,
            description="Channel ID to import videos from",
            example="UC_x5XG1OV2P6uZZ5FSM9Ttw",
        ),
        "limit": fields.Integer(
            required=False,
            description="Maximum number of videos to import",
            default=10,
            min=1,
            max=MAX_CHANNEL_LIMIT,
        ),
        "categoryId": fields.String(required=False, description="Optional category UUID"),
    },
)

source_import_request = Model(
    "ImportBySourceTypeRequest",
    {
        "sourceType": fields.String(
            required=True,
            description="Source type name, case-insensitive",
            example=SourceType.YOUTUBE.value,
        ),
        "url": fields.String(
            required=True,
            description="URL of the content to import",
            example="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
        ),
        "categoryId": fields.String(required=False, description="Optional category UUID"),
        "limit": fields.Integer(required=False, min=1, max=MAX_CHANNEL_LIMIT),
    },
)

duplicate_check_request = Model(
    "DuplicateCheckRequest",
    {
        "externalId": fields.String(required=True, example="dQw4w9WgXcQ"),
        "sourceType": fields.String(
            required=True,
            description="Source type name, case-insensitive",
            example=SourceType.YOUTUBE.value,
        ),
    },
)

# =============================================================================
# Response Models
# =============================================================================

imported_content = Model(
    "ImportedContent",
    {
        "id": fields.Integer(description="Catalog record ID"),
        "name": fields.String,
        "description": fields.String,
        "language": fields.String(enum=["ENGLISH", "ARABIC"]),
        "durationSec": fields.Integer,
        "releaseDate": fields.String,
        "mediaUrl": fields.String,
        "mediaType": fields.String(enum=["VIDEO", "AUDIO"]),
        "sourceType": fields.String(enum=SOURCE_TYPES),
        "sourceUrl": fields.String,
        "externalId": fields.String,
        "categoryId": fields.String,
        "status": fields.String,
        "createdAt": fields.String,
    },
)

import_result_response = Model(
    "ImportResult",
    {
        "success": fields.Boolean(description="False when the call itself failed"),
        "importedCount": fields.Integer,
        "duplicatesSkipped": fields.Integer(
            description="Items not imported (duplicates and save failures)"
        ),
        "imported": fields.List(fields.Nested(imported_content)),
        "errors": fields.List(fields.String),
        "message": fields.String,
    },
)

sources_response = Model(
    "SupportedSources",
    {"supportedSources": fields.List(fields.String(enum=SOURCE_TYPES))},
)

duplicate_check_response = Model(
    "DuplicateCheck",
    {
        "exists": fields.Boolean,
        "externalId": fields.String,
        "sourceType": fields.String(enum=SOURCE_TYPES),
    },
)

error_response = Model(
    "ErrorResponse",
    {
        "error": fields.String(description="Error category"),
        "title": fields.String,
        "message": fields.String,
        "action": fields.String,
        "detail": fields.String,
    },
)

ALL_MODELS = [
    video_import_request,
    channel_import_request,
    source_import_request,
    duplicate_check_request,
    imported_content,
    import_result_response,
    sources_response,
    duplicate_check_response,
    error_response,
]
