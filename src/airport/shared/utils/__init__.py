from .http_response import api_response as api_response
