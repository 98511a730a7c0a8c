"""
Integration Tests - API Endpoints
Full request/response cycle through the FastAPI application.
"""
import pytest


class TestAuthEndpoints:
    """Tests for registration and login."""

    def test_register_returns_user_and_token(self, client, sample_user_data):
        response = client.post("/api/register", json=sample_user_data)

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "testuser"
        assert data["firstName"] == "Test"
        assert data["role"] == "user"
        assert data["accessToken"]
        assert "hashedPassword" not in data

    def test_register_seeds_portfolio(self, client, auth_headers):
        data = client.get("/api/portfolio", headers=auth_headers).json()
        assert data["cashBalance"] == 10000.0
        assert data["holdings"] == []

    def test_register_duplicate_username(self, client, register, sample_user_data):
        register()
        response = client.post("/api/register", json=sample_user_data)

        assert response.status_code == 400
        assert response.json() == {"message": "Username already exists"}

    def test_register_missing_password(self, client):
        response = client.post("/api/register", json={"username": "bob"})
        assert response.status_code == 400
        assert response.json() == {"message": "Password is required"}

    def test_login(self, client, register, sample_user_data):
        register()
        response = client.post("/api/login", json={
            "username": sample_user_data["username"],
            "password": sample_user_data["password"],
        })
        assert response.status_code == 200
        assert response.json()["accessToken"]

    def test_login_wrong_password(self, client, register):
        register()
        response = client.post("/api/login", json={"username": "testuser", "password": "nope"})
        assert response.status_code == 401

    def test_admin_must_use_admin_login(self, client, register):
        register(username="root", role="admin")
        credentials = {"username": "root", "password": "SecurePassword123!"}

        user_login = client.post("/api/login", json=credentials)
        assert user_login.status_code == 403
        assert user_login.json() == {"message": "Please use admin login"}

        admin_login = client.post("/api/admin/login", json=credentials)
        assert admin_login.status_code == 200
        assert admin_login.json()["role"] == "admin"

    def test_admin_login_rejects_regular_user(self, client, register):
        register()
        response = client.post(
            "/api/admin/login", json={"username": "testuser", "password": "SecurePassword123!"}
        )
        assert response.status_code == 403
        assert response.json() == {"message": "Unauthorized. Admin access required."}

    def test_admin_has_no_portfolio(self, client, register):
        headers = register(username="root", role="admin")
        response = client.get("/api/portfolio", headers=headers)
        assert response.status_code == 500
        assert response.json() == {"message": "Portfolio not found"}

    def test_current_user(self, client, auth_headers):
        response = client.get("/api/user", headers=auth_headers)
        assert response.status_code == 200
        assert response.json()["username"] == "testuser"

    def test_logout(self, client):
        response = client.post("/api/logout")
        assert response.status_code == 200
        assert response.content == b""

    def test_forgot_password(self, client):
        response = client.post("/api/forgot-password", json={"email": "a@example.com"})
        assert response.status_code == 200
        assert "password reset link" in response.json()["message"]


class TestAuthorization:
    """Protected routes reject missing or bad tokens with a bodiless 401."""

    @pytest.mark.parametrize("method, path", [
        ("get", "/api/user"),
        ("get", "/api/portfolio"),
        ("get", "/api/portfolio/performance"),
        ("get", "/api/watchlist"),
        ("post", "/api/watchlist/add"),
        ("delete", "/api/watchlist/remove/AAPL"),
        ("post", "/api/trade/buy"),
        ("post", "/api/trade/sell"),
        ("get", "/api/transactions"),
    ])
    def test_requires_token(self, client, method, path):
        response = getattr(client, method)(path)
        assert response.status_code == 401
        assert response.content == b""

    def test_bad_token(self, client):
        response = client.get("/api/portfolio", headers={"Authorization": "Bearer garbage"})
        assert response.status_code == 401
        assert response.content == b""


class TestTradeEndpoints:

    def test_buy_and_sell(self, client, auth_headers):
        buy = client.post("/api/trade/buy", headers=auth_headers, json={
            "symbol": "AAPL", "shares": 10, "orderType": "market",
        })
        assert buy.status_code == 200
        assert buy.json()["message"] == "Purchase successful"
        assert buy.json()["transaction"]["total"] == 1458.60

        sell = client.post("/api/trade/sell", headers=auth_headers, json={
            "symbol": "AAPL", "shares": 4, "orderType": "market",
        })
        assert sell.status_code == 200
        assert sell.json()["transaction"]["type"] == "sell"

        portfolio = client.get("/api/portfolio", headers=auth_headers).json()
        assert portfolio["cashBalance"] == 9124.84
        holding = portfolio["holdings"][0]
        assert holding["shares"] == 6
        assert holding["costBasis"] == 1458.60
        assert portfolio["totalValue"] == 10000.0

    def test_missing_fields(self, client, auth_headers):
        response = client.post("/api/trade/buy", headers=auth_headers, json={})
        assert response.status_code == 400
        assert response.json() == {"message": "Symbol and shares are required"}

    def test_insufficient_funds(self, client, auth_headers):
        response = client.post("/api/trade/buy", headers=auth_headers, json={"symbol": "AMZN", "shares": 5})
        assert response.status_code == 400
        assert response.json() == {"message": "Insufficient funds"}

    def test_insufficient_shares(self, client, auth_headers):
        response = client.post("/api/trade/sell", headers=auth_headers, json={"symbol": "AAPL", "shares": 1})
        assert response.status_code == 400
        assert response.json() == {"message": "Insufficient shares"}

    def test_unknown_stock_is_400(self, client, auth_headers):
        response = client.post("/api/trade/buy", headers=auth_headers, json={"symbol": "ZZZZ", "shares": 1})
        assert response.status_code == 400
        assert response.json() == {"message": "Stock not found"}

    def test_negative_shares(self, client, auth_headers):
        response = client.post("/api/trade/buy", headers=auth_headers, json={"symbol": "AAPL", "shares": -2})
        assert response.status_code == 400


class TestPortfolioEndpoints:

    def test_portfolio_shape(self, client, auth_headers):
        data = client.get("/api/portfolio", headers=auth_headers).json()

        for key in ("id", "userId", "cashBalance", "holdings", "totalValue", "totalReturn",
                    "totalReturnPercent", "todayChange", "todayChangePercent",
                    "performanceData", "allocation"):
            assert key in data
        assert set(data["performanceData"]) == {"1D", "1W", "1M", "3M", "1Y", "ALL"}

    def test_performance(self, client, auth_headers):
        response = client.get("/api/portfolio/performance", headers=auth_headers)
        assert response.status_code == 200
        assert len(response.json()["data"]) == 366


class TestTransactionEndpoints:

    def test_pagination(self, client, auth_headers):
        for _ in range(3):
            client.post("/api/trade/buy", headers=auth_headers, json={"symbol": "INTC", "shares": 1})
        client.post("/api/trade/sell", headers=auth_headers, json={"symbol": "INTC", "shares": 1})

        page = client.get("/api/transactions?page=2&perPage=3", headers=auth_headers).json()
        assert page["currentPage"] == 2
        assert page["totalPages"] == 2
        assert page["totalCount"] == 4
        assert len(page["transactions"]) == 1

        sells = client.get("/api/transactions?filter=sell", headers=auth_headers).json()
        assert sells["totalCount"] == 1
        assert sells["transactions"][0]["type"] == "sell"

    def test_unknown_filter_lists_everything(self, client, auth_headers):
        client.post("/api/trade/buy", headers=auth_headers, json={"symbol": "INTC", "shares": 2})
        client.post("/api/trade/sell", headers=auth_headers, json={"symbol": "INTC", "shares": 1})

        response = client.get("/api/transactions?filter=dividend", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["totalCount"] == 2

    def test_page_past_int64(self, client, auth_headers):
        client.post("/api/trade/buy", headers=auth_headers, json={"symbol": "INTC", "shares": 1})

        response = client.get(
            "/api/transactions?page=10000000000000000000&perPage=10", headers=auth_headers
        )

        assert response.status_code == 200
        body = response.json()
        assert body["transactions"] == []
        assert body["totalCount"] == 1
        assert body["totalPages"] == 1


class TestWatchlistEndpoints:

    def test_add_list_remove(self, client, auth_headers):
        added = client.post("/api/watchlist/add", headers=auth_headers, json={"symbol": "tsla"})
        assert added.status_code == 200
        assert added.json()["message"] == "Added to watchlist"

        again = client.post("/api/watchlist/add", headers=auth_headers, json={"symbol": "TSLA"})
        assert again.json()["message"] == "Already in watchlist"

        items = client.get("/api/watchlist", headers=auth_headers).json()
        assert items == [{
            "symbol": "TSLA", "name": "Tesla Inc", "price": 765.34, "change": 53.12, "changePercent": 7.45,
        }]

        removed = client.delete("/api/watchlist/remove/TSLA", headers=auth_headers)
        assert removed.json() == {"message": "Removed from watchlist"}
        assert client.get("/api/watchlist", headers=auth_headers).json() == []

    def test_missing_symbol(self, client, auth_headers):
        response = client.post("/api/watchlist/add", headers=auth_headers, json={})
        assert response.status_code == 400
        assert response.json() == {"message": "Symbol is required"}

    def test_unknown_symbol_is_500(self, client, auth_headers):
        response = client.post("/api/watchlist/add", headers=auth_headers, json={"symbol": "ZZZZ"})
        assert response.status_code == 500


class TestMarketEndpoints:

    def test_overview(self, client):
        data = client.get("/api/market/overview").json()
        assert [i["symbol"] for i in data] == ["SPX", "COMP", "DJI", "RUT"]

    def test_movers(self, client):
        data = client.get("/api/market/movers").json()
        assert len(data) == 10
        assert data[0]["symbol"] == "TSLA"


class TestStockEndpoints:

    def test_search(self, client):
        response = client.get("/api/stock/search?q=apple")
        assert response.status_code == 200
        assert [r["symbol"] for r in response.json()["results"]] == ["AAPL"]

    def test_search_requires_query(self, client):
        assert client.get("/api/stock/search").status_code == 400

    def test_quote_by_path_and_query(self, client):
        by_path = client.get("/api/stock/quote/msft").json()
        by_query = client.get("/api/stock/quote?symbol=MSFT").json()
        assert by_path == by_query
        assert by_path["price"] == 286.22

    def test_quote_not_found(self, client):
        response = client.get("/api/stock/quote/ZZZZ")
        assert response.status_code == 404
        assert response.json() == {"message": "Stock not found"}

    def test_quote_missing_symbol(self, client):
        assert client.get("/api/stock/quote").status_code == 400

    def test_history(self, client):
        data = client.get("/api/stock/history/AAPL?period=5d").json()
        assert data["symbol"] == "AAPL"
        assert data["period"] == "5d"
        assert len(data["data"]) == 6

    def test_history_unknown_symbol(self, client):
        assert client.get("/api/stock/history/ZZZZ").status_code == 404


class TestHealthEndpoints:

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_ready(self, client):
        assert client.get("/ready").json()["checks"]["database"] == "connected"
