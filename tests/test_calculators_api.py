"""Tests for /api/v1/zakat and /api/v1/inheritance endpoints."""
import pytest

from halal_finance import create_app


class TestZakatEndpoint:
    """Tests for POST /api/v1/zakat endpoint."""

    def test_gold_above_nisab(self, client):
        response = client.post('/api/v1/zakat', json={
            'gold_grams': 100,
            'gold_price_per_ten_grams': 6850,
        })
        data = response.get_json()

        assert response.status_code == 200
        assert data['gold_value'] == 68500.0
        assert data['nisab_threshold'] == pytest.approx(52050.6)
        assert data['zakat_due'] == pytest.approx(1712.5)
        assert data['above_nisab'] is True
        assert data['zakat_rate'] == 0.025
        assert data['gold_price_source'] == 'request'

    def test_empty_body_below_nisab(self, client):
        """No holdings owe nothing, priced at the fallback."""
        response = client.post('/api/v1/zakat', json={})
        data = response.get_json()

        assert response.status_code == 200
        assert data['total_wealth'] == 0.0
        assert data['zakat_due'] == 0.0
        assert data['above_nisab'] is False
        assert data['gold_price_per_ten_grams'] == 6850.0
        assert data['gold_price_source'] == 'fallback'

    def test_bad_numbers_treated_as_zero(self, client):
        response = client.post('/api/v1/zakat', json={
            'gold_grams': 'lots',
            'cash': '-500',
            'investments': '60000',
        })
        data = response.get_json()

        assert response.status_code == 200
        assert data['total_wealth'] == 60000.0
        assert data['zakat_due'] == pytest.approx(1500.0)

    def test_non_object_body_rejected(self, client):
        response = client.post('/api/v1/zakat', json=[1, 2, 3])

        assert response.status_code == 400
        assert 'error' in response.get_json()

    def test_debts_exceed_assets(self, client):
        response = client.post('/api/v1/zakat', json={'cash': 100, 'debts': 1000})
        data = response.get_json()

        assert data['total_wealth'] == -900.0
        assert data['zakat_due'] == 0.0

    def test_silver_price_from_app_config(self):
        app = create_app({'TESTING': True, 'SILVER_PRICE_PER_GRAM': 100.0})
        with app.test_client() as client:
            data = client.post('/api/v1/zakat', json={'silver_grams': 10}).get_json()

        assert data['silver_value'] == 1000.0

    def test_silver_price_from_environment(self, client, monkeypatch):
        monkeypatch.setenv('SILVER_PRICE_PER_GRAM', '90')
        data = client.post('/api/v1/zakat', json={'silver_grams': 10}).get_json()

        assert data['silver_value'] == 900.0

    @pytest.mark.parametrize('raw', ['abc', '0', '-5', 'nan'])
    def test_invalid_silver_price_environment_uses_default(self, client, monkeypatch, raw):
        monkeypatch.setenv('SILVER_PRICE_PER_GRAM', raw)
        response = client.post('/api/v1/zakat', json={'silver_grams': 10})
        data = response.get_json()

        assert response.status_code == 200
        assert data['silver_value'] == 850.0
        assert data['nisab_threshold'] > 0

    def test_oversized_integer_treated_as_zero(self, client):
        response = client.post(
            '/api/v1/zakat',
            data='{"cash": 1' + '0' * 400 + '}',
            content_type='application/json',
        )
        data = response.get_json()

        assert response.status_code == 200
        assert data['total_wealth'] == 0.0
        assert data['zakat_due'] == 0.0

    def test_amounts_too_large_rejected(self, client):
        response = client.post('/api/v1/zakat', json={'cash': 1e308, 'investments': 1e308})

        assert response.status_code == 400
        assert response.get_json() == {'error': 'Amounts are too large to calculate'}


class TestInheritanceEndpoint:
    """Tests for POST /api/v1/inheritance endpoint."""

    def test_distribution(self, client):
        response = client.post('/api/v1/inheritance', json={
            'total_wealth': 1200000,
            'debts': 0,
            'heirs': {'spouse': 1, 'sons': 2, 'daughters': 1, 'father': 0, 'mother': 0},
        })
        data = response.get_json()

        assert response.status_code == 200
        assert data['net_wealth'] == 1200000.0
        assert data['shares'] == {
            'Spouse': 150000.0,
            'Daughters (1)': 210000.0,
            'Sons (2)': 840000.0,
        }
        assert data['total_distributed'] == 1200000.0
        assert data['unallocated'] == 0.0
        assert data['heirs'] == {'spouse': 1, 'sons': 2, 'daughters': 1, 'father': 0, 'mother': 0}

    def test_share_order_preserved(self, client):
        response = client.post('/api/v1/inheritance', json={
            'total_wealth': 2400,
            'heirs': {'spouse': 1, 'sons': 1, 'daughters': 1, 'father': 1, 'mother': 1},
        })

        assert list(response.get_json()['shares']) == [
            'Father', 'Mother', 'Spouse', 'Daughters (1)', 'Sons (1)',
        ]

    def test_insufficient_estate(self, client):
        response = client.post('/api/v1/inheritance', json={
            'total_wealth': 1000,
            'debts': 1000,
            'heirs': {'sons': 1},
        })
        data = response.get_json()

        assert response.status_code == 422
        assert data['error'] == 'insufficient_estate'
        assert data['net_wealth'] == 0.0

    def test_empty_body_is_insufficient(self, client):
        response = client.post('/api/v1/inheritance', json={})
        assert response.status_code == 422

    def test_oversized_integer_treated_as_zero(self, client):
        response = client.post(
            '/api/v1/inheritance',
            data='{"total_wealth": 1' + '0' * 400 + ', "heirs": {"sons": 1}}',
            content_type='application/json',
        )

        assert response.status_code == 422
        assert response.get_json()['net_wealth'] == 0.0

    def test_non_object_body_rejected(self, client):
        response = client.post('/api/v1/inheritance', json='estate')
        assert response.status_code == 400


class TestConfigEndpoints:
    """Tests for gold price and calculator config endpoints."""

    def test_gold_price_fallback(self, client):
        data = client.get('/api/v1/gold-price').get_json()

        assert data == {
            'price_per_ten_grams': 6850.0,
            'currency': 'INR',
            'source': 'fallback',
            'is_fallback': True,
        }

    def test_calculators_config(self, client):
        data = client.get('/api/v1/calculators/config').get_json()

        assert data['zakat'] == {
            'silver_price_per_gram': 85.0,
            'nisab_gold_grams': 87.48,
            'nisab_silver_grams': 612.36,
            'zakat_rate': 0.025,
        }
        assert data['inheritance']['parent_fraction'] == pytest.approx(1 / 6)
        assert data['inheritance']['son_units'] == 2
        assert data['providers']['market_data']['configured'] is False
