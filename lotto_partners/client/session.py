from lotto_partners.client import state as transitions
from lotto_partners.client.proxy import CompletionProxyClient, ProxyRequestError
from lotto_partners.client.state import AppState, Tab
from lotto_partners.core.draw import RandomSource, generate_draw
from lotto_partners.core.prompts import (
    RECOMMENDATION_CONFIG,
    STOCK_FALLBACK_MESSAGE,
    DealContext,
    deals_prompt,
    stock_prompt,
)
from lotto_partners.core.recommendations import RecommendationError, parse_recommendations
from lotto_partners.utils.logging import get_logger


logger = get_logger("session")


class PartnersSession:
    """
    Drives the three features against the completion proxy.

    Every step replaces ``state`` with a new snapshot, so a caller can
    render whatever ``state`` holds at any point.
    """

    def __init__(
        self,
        proxy: CompletionProxyClient,
        rng: RandomSource | None = None,
        initial_state: AppState | None = None,
    ):
        self.proxy = proxy
        self.rng = rng
        self.state = initial_state if initial_state is not None else AppState()

    def select_tab(self, tab: Tab) -> AppState:
        self.state = transitions.select_tab(self.state, tab)
        return self.state

    async def generate_lotto(self) -> AppState:
        """Draw new numbers, then load matching recommendations."""
        self.state = transitions.draw_started(self.state)
        numbers = generate_draw(self.rng)
        self.state = transitions.draw_finished(self.state, numbers)
        logger.info(f"Drew {numbers}")

        await self.fetch_deals("lotto")
        return self.state

    async def ask_stock(self, question: str) -> AppState:
        """Ask a stock question. Blank questions are ignored."""
        self.state = transitions.set_stock_query(self.state, question)
        if not question.strip():
            return self.state

        self.state = transitions.stock_started(self.state)
        try:
            text = await self.proxy.complete(stock_prompt(question))
        except ProxyRequestError as e:
            logger.error(f"Stock question failed: {e}")
            self.state = transitions.stock_failed(self.state, STOCK_FALLBACK_MESSAGE)
            return self.state

        self.state = transitions.stock_answered(self.state, text)
        await self.fetch_deals("stock", question)
        return self.state

    async def fetch_deals(self, context: DealContext, query: str | None = None) -> AppState:
        """Replace the recommendations. On failure they stay empty."""
        self.state = transitions.deals_started(self.state)
        try:
            text = await self.proxy.complete(
                deals_prompt(context, query),
                config=RECOMMENDATION_CONFIG,
            )
            deals = parse_recommendations(text)
        except (ProxyRequestError, RecommendationError) as e:
            logger.error(f"Error fetching recommendations: {e}")
            self.state = transitions.deals_failed(self.state)
            return self.state

        self.state = transitions.deals_loaded(self.state, deals)
        return self.state
