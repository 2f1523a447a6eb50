from .builder import FORM_CONTENT_TYPE, JSON_CONTENT_TYPE, PreparedRequest, config_request
from .client import HttpClient, HttpResponse, open_session
from .options import RequestOptions
from .query import build_query, urlencode_form
from .url import UrlComponents, parse_url

__all__ = [
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "PreparedRequest",
    "config_request",
    "HttpClient",
    "HttpResponse",
    "open_session",
    "RequestOptions",
    "build_query",
    "urlencode_form",
    "UrlComponents",
    "parse_url",
]
