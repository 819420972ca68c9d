import json
import os
from dataclasses import dataclass

import pytest

# ハンドラーはモジュール読み込み時にサービスを組み立てるため、import 前に設定する
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "test-flight-table")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "flight-service")
os.environ.pop("EVENT_BUS_NAME", None)


@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:test-function"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST) のプロキシイベントを生成する Factory fixture"""

    def _factory(
        method: str = "GET",
        path: str = "/flights",
        body: dict | None = None,
        path_parameters: dict | None = None,
        query_parameters: dict | None = None,
    ) -> dict:
        return {
            "httpMethod": method,
            "path": path,
            "resource": path,
            "headers": {"Content-Type": "application/json"},
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
            "pathParameters": path_parameters,
            "queryStringParameters": query_parameters,
            "requestContext": {"requestId": "test-request", "stage": "prod"},
        }

    return _factory
