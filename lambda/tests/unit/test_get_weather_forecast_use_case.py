"""
Testes Unitários - GetWeatherForecastUseCase
"""
import pytest
from datetime import date, datetime, timedelta, timezone

from application.use_cases.get_weather_forecast_use_case import GetWeatherForecastUseCase
from domain.entities.forecast_summary import ForecastSummary
from domain.result import ErrorKind


D1 = datetime(2025, 11, 27, 0, 0, tzinfo=timezone.utc)
D2 = D1 + timedelta(days=1)


@pytest.fixture
def use_case(mock_weather_source, now):
    return GetWeatherForecastUseCase(weather_source=mock_weather_source, clock=lambda: now)


@pytest.mark.asyncio
class TestGetWeatherForecastUseCase:
    """Testes para GetWeatherForecastUseCase"""
    
    @pytest.mark.parametrize('days', [0, 11, -1])
    async def test_invalid_days_rejected_without_io(self, use_case, mock_weather_source, days):
        """REGRA: days fora de [1, 10] é InvalidInput"""
        result = await use_case.execute('Madrid', days)
        
        assert result.kind is ErrorKind.INVALID_INPUT
        assert result.error.details == {'days': days, 'min': 1, 'max': 10}
        mock_weather_source.get_forecast_samples.assert_not_called()
    
    @pytest.mark.parametrize('days', [1, 10])
    async def test_boundary_days_accepted(self, use_case, mock_weather_source, make_sample, days):
        mock_weather_source.get_forecast_samples.return_value = [make_sample(timestamp=D1)]
        
        result = await use_case.execute('Madrid', days)
        
        assert result.is_success
        mock_weather_source.get_forecast_samples.assert_awaited_once_with('Madrid', days)
    
    async def test_non_integer_days_rejected(self, use_case):
        result = await use_case.execute('Madrid', '5')
        
        assert result.kind is ErrorKind.INVALID_INPUT
    
    async def test_empty_city_rejected(self, use_case, mock_weather_source):
        result = await use_case.execute('', 5)
        
        assert result.kind is ErrorKind.INVALID_INPUT
        mock_weather_source.get_forecast_samples.assert_not_called()
    
    async def test_first_seen_date_order(self, use_case, mock_weather_source, make_sample):
        """Amostras [D1, D1, D2, D1]: days=2 → [D1, D2]; days=1 → [D1]"""
        mock_weather_source.get_forecast_samples.return_value = [
            make_sample(timestamp=D1 + timedelta(hours=3)),
            make_sample(timestamp=D1 + timedelta(hours=6)),
            make_sample(timestamp=D2 + timedelta(hours=3)),
            make_sample(timestamp=D1 + timedelta(hours=9)),
        ]
        
        two_days = await use_case.execute('Berlin', 2)
        one_day = await use_case.execute('Berlin', 1)
        
        assert [d.date for d in two_days.value.days] == [date(2025, 11, 27), date(2025, 11, 28)]
        assert [d.date for d in one_day.value.days] == [date(2025, 11, 27)]
    
    async def test_summary_fields(self, use_case, mock_weather_source, make_sample, now):
        mock_weather_source.get_forecast_samples.return_value = [
            make_sample(timestamp=D1, temperature=10),
            make_sample(timestamp=D1 + timedelta(hours=3), temperature=15),
            make_sample(timestamp=D1 + timedelta(hours=6), temperature=12),
        ]
        
        result = await use_case.execute('Berlin', 5)
        
        summary = result.value
        assert isinstance(summary, ForecastSummary)
        assert summary.city == 'Berlin'
        assert summary.generated_at == now
        assert summary.id
        assert len(summary.days) == 1
        assert summary.days[0].min_temperature == 10
        assert summary.days[0].max_temperature == 15
    
    async def test_each_call_generates_new_id(self, use_case, mock_weather_source, make_sample):
        mock_weather_source.get_forecast_samples.return_value = [make_sample(timestamp=D1)]
        
        first = await use_case.execute('Berlin')
        second = await use_case.execute('Berlin')
        
        assert first.value.id != second.value.id
    
    @pytest.mark.parametrize('samples', [None, []])
    async def test_no_samples_is_not_found(self, use_case, mock_weather_source, samples):
        mock_weather_source.get_forecast_samples.return_value = samples
        
        result = await use_case.execute('Berlin', 3)
        
        assert result.kind is ErrorKind.NOT_FOUND
    
    async def test_source_exception_is_transport_failure(self, use_case, mock_weather_source):
        mock_weather_source.get_forecast_samples.side_effect = OSError('network down')
        
        result = await use_case.execute('Berlin', 3)
        
        assert result.kind is ErrorKind.TRANSPORT_FAILURE
        assert isinstance(result.error.original, OSError)
