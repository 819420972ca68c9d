import json
from unittest.mock import patch

import pytest

from airport.flight.handlers import create_flight as create_flight_handler
from airport.flight.handlers import delete_flight as delete_flight_handler
from airport.flight.handlers import find_by_departure as find_by_departure_handler
from airport.flight.handlers import find_by_route as find_by_route_handler
from airport.flight.handlers import get_flight as get_flight_handler
from airport.flight.handlers import list_flights as list_flights_handler
from airport.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    ResourceNotFoundException,
)


class TestCreateFlightHandler:
    """POST /flights のテスト"""

    @pytest.fixture
    def mock_service(self):
        with patch.object(create_flight_handler, "service") as mock:
            yield mock

    def test_create_returns_201(
        self, mock_service, api_event, lambda_context, create_flight
    ):
        """登録に成功すると 201 とフライト情報を返す"""
        # Arrange
        mock_service.create_flight.return_value = create_flight()
        event = api_event(
            method="POST",
            body={
                "flightNumber": "UA101",
                "origin": "JFK",
                "destination": "LAX",
                "scheduledDeparture": "2030-01-01T10:00:00Z",
                "scheduledArrival": "2030-01-01T14:00:00Z",
            },
        )

        # Act
        response = create_flight_handler.lambda_handler(event, lambda_context)

        # Assert
        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["status"] == "success"
        assert body["data"]["flight_number"] == "UA101"
        assert body["data"]["passenger_count"] == 0
        args = mock_service.create_flight.call_args[0]
        assert args[:3] == ("UA101", "JFK", "LAX")

    def test_schedule_is_optional(
        self, mock_service, api_event, lambda_context, create_flight
    ):
        mock_service.create_flight.return_value = create_flight()
        event = api_event(
            method="POST",
            body={"flight_number": "UA101", "origin": "JFK", "destination": "LAX"},
        )

        response = create_flight_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 201
        mock_service.create_flight.assert_called_once_with(
            "UA101", "JFK", "LAX", None, None
        )

    def test_invalid_body_returns_400(self, mock_service, api_event, lambda_context):
        """入力検証に失敗すると 400 VALIDATION_ERROR"""
        event = api_event(
            method="POST",
            body={"flightNumber": "U", "origin": "JFK", "destination": "LAX"},
        )

        response = create_flight_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"]
        mock_service.create_flight.assert_not_called()

    def test_business_rule_violation_returns_400(
        self, mock_service, api_event, lambda_context
    ):
        mock_service.create_flight.side_effect = BusinessRuleViolationException(
            "Cannot schedule flight in the past"
        )
        event = api_event(
            method="POST",
            body={"flightNumber": "UA101", "origin": "JFK", "destination": "LAX"},
        )

        response = create_flight_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["error_code"] == "BUSINESS_RULE_VIOLATION"
        assert body["message"] == "Cannot schedule flight in the past"

    def test_duplicate_returns_409(self, mock_service, api_event, lambda_context):
        mock_service.create_flight.side_effect = DuplicateResourceException(
            "Flight already exists: UA101"
        )
        event = api_event(
            method="POST",
            body={"flightNumber": "UA101", "origin": "JFK", "destination": "LAX"},
        )

        response = create_flight_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 409
        assert json.loads(response["body"])["error_code"] == "CONFLICT"

    def test_unexpected_error_returns_500(
        self, mock_service, api_event, lambda_context
    ):
        mock_service.create_flight.side_effect = RuntimeError("boom")
        event = api_event(
            method="POST",
            body={"flightNumber": "UA101", "origin": "JFK", "destination": "LAX"},
        )

        response = create_flight_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 500
        body = json.loads(response["body"])
        assert body["error_code"] == "INTERNAL_ERROR"
        assert "boom" not in body["message"]


class TestGetFlightHandler:
    """GET /flights/{flight_number} のテスト"""

    @pytest.fixture
    def mock_service(self):
        with patch.object(get_flight_handler, "service") as mock:
            yield mock

    def test_get_returns_flight_with_passengers(
        self, mock_service, api_event, lambda_context, create_flight, create_passenger
    ):
        mock_service.get_flight_with_passengers.return_value = create_flight(
            passengers=[create_passenger(passenger_id="p-1", seat_number="12A")]
        )
        event = api_event(path_parameters={"flight_number": "UA101"})

        response = get_flight_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        data = json.loads(response["body"])["data"]
        assert data["passengers"] == [
            {
                "id": "p-1",
                "name": "John Doe",
                "seat_assignment": {"seat_number": "12A", "seat_class": "Economy"},
            }
        ]
        mock_service.get_flight_with_passengers.assert_called_once_with("UA101")

    def test_not_found_returns_404(self, mock_service, api_event, lambda_context):
        mock_service.get_flight_with_passengers.side_effect = (
            ResourceNotFoundException("Flight not found: UA999")
        )
        event = api_event(path_parameters={"flight_number": "UA999"})

        response = get_flight_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404
        body = json.loads(response["body"])
        assert body["error_code"] == "NOT_FOUND"
        assert body["message"] == "Flight not found: UA999"

    def test_missing_path_parameter_returns_400(
        self, mock_service, api_event, lambda_context
    ):
        response = get_flight_handler.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 400
        mock_service.get_flight_with_passengers.assert_not_called()


class TestListFlightsHandler:
    """GET /flights のテスト"""

    @pytest.fixture
    def mock_service(self):
        with patch.object(list_flights_handler, "service") as mock:
            yield mock

    def test_list_returns_flights_and_count(
        self, mock_service, api_event, lambda_context, create_flight
    ):
        mock_service.list_flights.return_value = [
            create_flight("UA101"),
            create_flight("AA303"),
        ]

        response = list_flights_handler.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 200
        data = json.loads(response["body"])["data"]
        assert data["count"] == 2
        assert [f["flight_number"] for f in data["flights"]] == ["UA101", "AA303"]


class TestDeleteFlightHandler:
    """DELETE /flights/{flight_number} のテスト"""

    @pytest.fixture
    def mock_service(self):
        with patch.object(delete_flight_handler, "service") as mock:
            yield mock

    def test_delete_returns_200(self, mock_service, api_event, lambda_context):
        mock_service.delete_flight.return_value = True
        event = api_event(method="DELETE", path_parameters={"flight_number": "UA101"})

        response = delete_flight_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["status"] == "success"

    def test_delete_unknown_flight_returns_404(
        self, mock_service, api_event, lambda_context
    ):
        mock_service.delete_flight.return_value = False
        event = api_event(method="DELETE", path_parameters={"flight_number": "UA999"})

        response = delete_flight_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 404


class TestSearchHandlers:
    """路線検索・出発時刻範囲検索のテスト"""

    def test_find_by_route(self, api_event, lambda_context, create_flight):
        with patch.object(find_by_route_handler, "service") as mock_service:
            mock_service.find_flights_by_route.return_value = [create_flight()]
            event = api_event(
                query_parameters={"origin": "JFK", "destination": "LAX"}
            )

            response = find_by_route_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"]["count"] == 1
        mock_service.find_flights_by_route.assert_called_once_with("JFK", "LAX")

    def test_find_by_route_without_destination_returns_400(
        self, api_event, lambda_context
    ):
        with patch.object(find_by_route_handler, "service") as mock_service:
            event = api_event(query_parameters={"origin": "JFK"})

            response = find_by_route_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        mock_service.find_flights_by_route.assert_not_called()

    def test_find_by_departure(self, api_event, lambda_context):
        with patch.object(find_by_departure_handler, "service") as mock_service:
            mock_service.find_flights_by_departure_range.return_value = []
            event = api_event(
                query_parameters={
                    "start": "2030-01-01T00:00:00Z",
                    "end": "2030-01-02T00:00:00Z",
                }
            )

            response = find_by_departure_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["data"] == {"flights": [], "count": 0}
        start, end = mock_service.find_flights_by_departure_range.call_args[0]
        assert start.isoformat() == "2030-01-01T00:00:00+00:00"
        assert end.isoformat() == "2030-01-02T00:00:00+00:00"

    def test_inverted_departure_range_returns_400(self, api_event, lambda_context):
        with patch.object(find_by_departure_handler, "service") as mock_service:
            mock_service.find_flights_by_departure_range.side_effect = (
                BusinessRuleViolationException(
                    "Start time must be before or equal to end time"
                )
            )
            event = api_event(
                query_parameters={
                    "start": "2030-01-02T00:00:00Z",
                    "end": "2030-01-01T00:00:00Z",
                }
            )

            response = find_by_departure_handler.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error_code"] == "BUSINESS_RULE_VIOLATION"
