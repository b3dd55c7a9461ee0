import json
import random

import httpx
import pytest

from lotto_partners.client.proxy import CompletionProxyClient, ProxyRequestError
from lotto_partners.client.session import PartnersSession
from lotto_partners.client.state import Tab
from lotto_partners.core.prompts import RECOMMENDATION_CONFIG, STOCK_FALLBACK_MESSAGE
from lotto_partners.core.recommendations import Recommendation
from lotto_partners.models.config import ClientConfig

from conftest import gemini_payload


DEALS_TEXT = json.dumps(
    [
        {"name": "전동 킥보드", "description": "출퇴근이 즐거워집니다."},
        {"name": "안마의자", "description": "하루의 피로를 풀어보세요."},
        {"name": "에스프레소 머신", "description": "집에서 즐기는 카페."},
    ],
    ensure_ascii=False,
)


class FakeProxy:
    """Stands in for the proxy endpoint: JSON for recommendations, prose otherwise."""

    def __init__(self, stock_status: int = 200, deals_text: str = DEALS_TEXT):
        self.stock_status = stock_status
        self.deals_text = deals_text
        self.payloads: list[dict] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.payloads.append(payload)
        if "config" in payload:
            return httpx.Response(200, json={"text": self.deals_text})
        if self.stock_status != 200:
            return httpx.Response(self.stock_status, json={"error": "boom"})
        return httpx.Response(200, json={"text": "ETF는 여러 종목을 묶은 상품입니다."})


def make_session(fake: FakeProxy, **kwargs) -> PartnersSession:
    proxy = CompletionProxyClient(ClientConfig(), transport=httpx.MockTransport(fake))
    return PartnersSession(proxy, **kwargs)


async def test_lotto_draw_is_enriched_with_recommendations():
    fake = FakeProxy()
    session = make_session(fake, rng=random.Random(7))

    state = await session.generate_lotto()

    assert len(state.lotto_numbers) == 6
    assert list(state.lotto_numbers) == sorted(set(state.lotto_numbers))
    assert [deal.name for deal in state.deals] == ["전동 킥보드", "안마의자", "에스프레소 머신"]
    assert not state.is_loading_lotto and not state.is_loading_deals

    [payload] = fake.payloads
    assert "로또" in payload["contents"]
    assert payload["config"] == RECOMMENDATION_CONFIG


async def test_stock_answer_then_related_recommendations():
    fake = FakeProxy()
    session = make_session(fake)

    state = await session.ask_stock("ETF가 뭐야?")

    assert state.stock_query == "ETF가 뭐야?"
    assert state.stock_response == "ETF는 여러 종목을 묶은 상품입니다."
    assert len(state.deals) == 3
    assert len(fake.payloads) == 2
    assert "config" not in fake.payloads[0]
    assert '"ETF가 뭐야?"' in fake.payloads[1]["contents"]


async def test_stock_failure_shows_fallback_and_skips_recommendations():
    fake = FakeProxy(stock_status=500)
    session = make_session(fake)

    state = await session.ask_stock("삼성전자 전망은?")

    assert state.stock_response == STOCK_FALLBACK_MESSAGE
    assert not state.is_loading_stock
    assert state.deals == ()
    assert len(fake.payloads) == 1


async def test_blank_question_is_ignored():
    fake = FakeProxy()
    session = make_session(fake)

    state = await session.ask_stock("   ")

    assert state.stock_response == ""
    assert fake.payloads == []


async def test_unparseable_recommendations_leave_list_empty():
    fake = FakeProxy(deals_text="sorry, no JSON today")
    session = make_session(fake)

    state = await session.fetch_deals("general")

    assert state.deals == ()
    assert not state.is_loading_deals


async def test_new_request_replaces_previous_recommendations():
    fake = FakeProxy()
    session = make_session(fake)
    await session.fetch_deals("general")

    fake.deals_text = json.dumps([{"name": "책", "description": "좋은 책."}], ensure_ascii=False)
    state = await session.fetch_deals("general")

    assert state.deals == (Recommendation(name="책", description="좋은 책."),)


def test_select_tab():
    session = make_session(FakeProxy())

    assert session.select_tab(Tab.STOCK).active_tab is Tab.STOCK


async def test_proxy_client_reports_status():
    proxy = CompletionProxyClient(
        ClientConfig(),
        transport=httpx.MockTransport(lambda request: httpx.Response(400, json={"error": "bad"})),
    )

    with pytest.raises(ProxyRequestError) as excinfo:
        await proxy.complete("hi")

    assert excinfo.value.status_code == 400
    await proxy.close()


async def test_session_against_proxy_app(app, provider):
    provider.reply = lambda request: httpx.Response(200, json=gemini_payload(DEALS_TEXT))
    config = ClientConfig(base_url="http://testserver")
    async with CompletionProxyClient(config, transport=httpx.ASGITransport(app=app)) as proxy:
        session = PartnersSession(proxy, rng=random.Random(3))
        state = await session.generate_lotto()

    assert len(state.deals) == 3
    [body] = provider.bodies()
    assert body["generationConfig"]["responseMimeType"] == "application/json"


@pytest.mark.parametrize("text", [None, 5, ["a"]])
async def test_non_string_text_is_a_failed_enrichment(text):
    proxy = CompletionProxyClient(
        ClientConfig(),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"text": text})),
    )
    session = PartnersSession(proxy)

    state = await session.fetch_deals("general")

    assert state.deals == ()
    assert not state.is_loading_deals


async def test_non_string_stock_answer_shows_fallback():
    proxy = CompletionProxyClient(
        ClientConfig(),
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"text": None})),
    )
    session = PartnersSession(proxy)

    state = await session.ask_stock("ETF가 뭐야?")

    assert state.stock_response == STOCK_FALLBACK_MESSAGE
    assert not state.is_loading_stock
    assert not state.is_loading_deals
