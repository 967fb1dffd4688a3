"""
Helpers de assertions para testes de integração
"""
import json
from typing import Dict, Any


def _content_type(response: Dict[str, Any]):
    # AWS Powertools pode retornar headers ou multiValueHeaders
    if 'multiValueHeaders' in response and response['multiValueHeaders']:
        return response['multiValueHeaders'].get('Content-Type', [None])[0]
    return (response.get('headers') or {}).get('Content-Type')


def assert_200_ok(response: Dict[str, Any], expected_content_type: str = 'application/json'):
    """
    Valida resposta 200 OK
    
    Raises:
        AssertionError: Se a resposta não for 200 ou não tiver estrutura correta
    """
    assert response['statusCode'] == 200, f"Expected 200, got {response['statusCode']}"
    assert 'body' in response, "Response should have body"
    
    content_type = _content_type(response)
    assert content_type == expected_content_type, \
        f"Content-Type should be {expected_content_type}, got {content_type}"


def assert_error(response: Dict[str, Any], status_code: int, error_type: str):
    """
    Valida resposta de erro com corpo JSON {type, error, message}
    """
    assert response['statusCode'] == status_code, \
        f"Expected {status_code}, got {response['statusCode']}"
    
    body = json.loads(response['body'])
    assert 'error' in body, f"{status_code} response should contain 'error' field"
    assert body.get('type') == error_type, \
        f"Error type should be {error_type}, got {body.get('type')}"


def assert_400_bad_request(response: Dict[str, Any]):
    assert_error(response, 400, 'InvalidInputException')


def assert_404_not_found(response: Dict[str, Any]):
    assert_error(response, 404, 'WeatherDataNotFoundException')


def assert_snapshot_structure(snapshot: Dict[str, Any]):
    """
    Valida estrutura de um snapshot de clima (camelCase)
    """
    required_fields = [
        'id', 'city', 'country', 'temperature', 'feelsLike', 'humidity',
        'windSpeed', 'description', 'icon', 'timestamp', 'source'
    ]
    for field in required_fields:
        assert field in snapshot, f"Snapshot should contain '{field}'"
    
    assert isinstance(snapshot['temperature'], (int, float))
    assert 0 <= snapshot['humidity'] <= 100, f"Humidity out of range: {snapshot['humidity']}"


def assert_forecast_structure(forecast: Dict[str, Any], max_days: int):
    """
    Valida estrutura da previsão agregada por dia
    """
    for field in ['id', 'city', 'days', 'timestamp']:
        assert field in forecast, f"Forecast should contain '{field}'"
    
    days = forecast['days']
    assert len(days) <= max_days, f"Expected at most {max_days} days, got {len(days)}"
    assert len({day['date'] for day in days}) == len(days), "Dates should be unique"
    
    for day in days:
        assert day['minTemperature'] <= day['maxTemperature'], \
            f"min > max for {day['date']}"
