"""
API client and HTTP adapter tests.
"""
from datetime import date
from unittest.mock import MagicMock

import pytest
import requests

from apps.menu.domain.exceptions import CatalogUnavailableError
from apps.menu.infrastructure.repositories.http_catalog_repository import HttpCatalogRepository
from apps.orders.domain.exceptions import OrderSubmissionError
from apps.orders.infrastructure.gateways import HttpOrderGateway, HttpPromotionRepository
from apps.reservations.domain.exceptions import ReservationSubmissionError
from apps.reservations.infrastructure.gateways import HttpReservationGateway
from apps.users.domain.exceptions import InvalidCredentialsError
from apps.users.infrastructure.gateways import HttpAuthGateway
from shared.domain import AuthenticationExpiredError, ExternalServiceError
from shared.infrastructure.http import ApiClient


def fake_response(status_code=200, body=None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session, headers={})


def make_client(session, token=None, on_unauthorized=None):
    return ApiClient(
        token_provider=lambda: token,
        on_unauthorized=on_unauthorized,
        session=session,
    )


class TestApiClient:
    def test_unwraps_data_envelope(self, session):
        session.request.return_value = fake_response(200, {'success': True, 'message': "ok", 'data': [1, 2]})

        assert make_client(session).get("/menu") == [1, 2]
        session.request.assert_called_once_with(
            'GET', "http://testserver/api/menu", headers={}, timeout=1.0, params=None,
        )

    def test_bearer_token_is_sent(self, session):
        session.request.return_value = fake_response(201, {'success': True, 'data': {'MaDonHang': 1}})

        make_client(session, token="abc").post("/orders", {'x': 1})

        kwargs = session.request.call_args.kwargs
        assert kwargs['headers'] == {'Authorization': "Bearer abc"}
        assert kwargs['json'] == {'x': 1}

    def test_401_runs_callback_and_raises(self, session):
        session.request.return_value = fake_response(401, {'success': False, 'message': "Token hết hạn"})
        on_unauthorized = MagicMock()

        with pytest.raises(AuthenticationExpiredError) as excinfo:
            make_client(session, token="old", on_unauthorized=on_unauthorized).get("/orders")

        on_unauthorized.assert_called_once_with()
        assert excinfo.value.message == "Token hết hạn"

    def test_backend_message_is_kept(self, session):
        session.request.return_value = fake_response(400, {'success': False, 'message': "Thiếu thông tin"})

        with pytest.raises(ExternalServiceError) as excinfo:
            make_client(session).post("/orders", {})

        assert excinfo.value.message == "Thiếu thông tin"
        assert excinfo.value.status_code == 400

    def test_success_false_with_200_is_an_error(self, session):
        session.request.return_value = fake_response(200, {'success': False, 'message': "Không hợp lệ"})

        with pytest.raises(ExternalServiceError):
            make_client(session).get("/promotions")

    def test_non_json_error_gets_generic_message(self, session):
        session.request.return_value = fake_response(502, ValueError("not json"))

        with pytest.raises(ExternalServiceError) as excinfo:
            make_client(session).get("/menu")

        assert excinfo.value.message == "Something went wrong. Please try again."

    def test_network_failure(self, session):
        session.request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(ExternalServiceError) as excinfo:
            make_client(session).get("/menu")

        assert excinfo.value.code == "NETWORK_ERROR"


class TestHttpCatalogRepository:
    def test_fetch_normalizes_and_caches(self, session):
        session.request.return_value = fake_response(200, {'success': True, 'data': [
            {'MaMon': 1, 'TenMon': "Phở bò", 'Gia': "50000.00", 'loaiMon': {'TenLoai': "Món chính"}},
            {'maMon': 2, 'tenMon': "Trà đá", 'gia': 30000},
            {'TenMon': "thiếu mã"},
        ]})
        repository = HttpCatalogRepository(make_client(session))

        catalog = repository.fetch()
        again = repository.fetch()

        assert [item.id for item in catalog] == [1, 2]
        assert catalog[2].name == "Trà đá"
        assert [item.id for item in again] == [1, 2]
        assert session.request.call_count == 1

    def test_invalidate_forces_refetch(self, session):
        session.request.return_value = fake_response(200, {'success': True, 'data': []})
        repository = HttpCatalogRepository(make_client(session))

        repository.fetch()
        repository.invalidate()
        repository.fetch()

        assert session.request.call_count == 2

    def test_unavailable_menu(self, session):
        session.request.return_value = fake_response(500, {'success': False})

        with pytest.raises(CatalogUnavailableError):
            HttpCatalogRepository(make_client(session)).fetch()


class TestHttpPromotionRepository:
    def test_filters_to_active_and_skips_bad_rows(self, session):
        session.request.return_value = fake_response(200, {'success': True, 'data': [
            {'MaKM': 1, 'TenKM': "Tháng 10", 'LoaiGiamGia': "PhanTram", 'GiaTriGiam': 10,
             'NgayBatDau': "2026-10-01", 'NgayKetThuc': "2026-10-31", 'MaApDung': "OCT"},
            {'MaKM': 2, 'TenKM': "Hè", 'LoaiGiamGia': "SoTien", 'GiaTriGiam': 5000,
             'NgayBatDau': "2026-06-01", 'NgayKetThuc': "2026-08-31", 'MaApDung': "HE"},
            {'MaKM': 3, 'TenKM': "Lỗi", 'LoaiGiamGia': "PhanTram", 'GiaTriGiam': 10,
             'NgayBatDau': "không phải ngày", 'NgayKetThuc': "2026-10-31"},
        ]})

        promotions = HttpPromotionRepository(make_client(session)).find_active(date(2026, 10, 19))

        assert [promotion.id for promotion in promotions] == [1]


class TestGateways:
    def test_order_rejection_is_wrapped(self, session):
        session.request.return_value = fake_response(400, {'success': False, 'message': "Hết món"})

        with pytest.raises(OrderSubmissionError) as excinfo:
            HttpOrderGateway(make_client(session)).submit({})

        assert excinfo.value.message == "Hết món"
        assert excinfo.value.status_code == 400

    def test_order_auth_failure_is_not_wrapped(self, session):
        session.request.return_value = fake_response(401, {'success': False})

        with pytest.raises(AuthenticationExpiredError):
            HttpOrderGateway(make_client(session)).submit({})

    def test_reservation_posts_to_public_endpoint(self, session):
        session.request.return_value = fake_response(201, {'success': True, 'data': {'maDatBan': 5}})

        created = HttpReservationGateway(make_client(session)).submit({'HoTen': "An"})

        assert created == {'maDatBan': 5}
        assert session.request.call_args.args == ('POST', "http://testserver/api/public/dat-ban")

    def test_reservation_conflict_is_wrapped(self, session):
        session.request.return_value = fake_response(409, {'success': False, 'message': "Hết bàn"})

        with pytest.raises(ReservationSubmissionError) as excinfo:
            HttpReservationGateway(make_client(session)).submit({})

        assert excinfo.value.message == "Hết bàn"

    def test_login_rejection_is_invalid_credentials(self, session):
        session.request.return_value = fake_response(401, {'success': False, 'message': "Sai mật khẩu"})

        with pytest.raises(InvalidCredentialsError) as excinfo:
            HttpAuthGateway(make_client(session)).login("an", "wrong")

        assert excinfo.value.message == "Sai mật khẩu"
        assert session.request.call_args.kwargs['json'] == {'TenDangNhap': "an", 'MatKhau': "wrong"}
