from enum import Enum

from pydantic import BaseModel, ConfigDict

from lotto_partners.core.recommendations import Recommendation


class Tab(str, Enum):
    LOTTO = "lotto"
    STOCK = "stock"
    DEALS = "deals"


class AppState(BaseModel):
    """Immutable snapshot of the app. Replaced, never mutated."""

    model_config = ConfigDict(frozen=True)

    active_tab: Tab = Tab.LOTTO
    lotto_numbers: tuple[int, ...] = ()
    stock_query: str = ""
    stock_response: str = ""
    deals: tuple[Recommendation, ...] = ()

    is_loading_lotto: bool = False
    is_loading_stock: bool = False
    is_loading_deals: bool = False

    @property
    def show_lotto_recommendations(self) -> bool:
        return bool(self.lotto_numbers) or self.is_loading_deals

    @property
    def show_stock_recommendations(self) -> bool:
        return bool(self.stock_response) or self.is_loading_deals


def select_tab(state: AppState, tab: Tab) -> AppState:
    return state.model_copy(update={"active_tab": Tab(tab)})


def set_stock_query(state: AppState, query: str) -> AppState:
    return state.model_copy(update={"stock_query": query})


def draw_started(state: AppState) -> AppState:
    return state.model_copy(update={"is_loading_lotto": True, "lotto_numbers": ()})


def draw_finished(state: AppState, numbers: list[int]) -> AppState:
    return state.model_copy(update={"is_loading_lotto": False, "lotto_numbers": tuple(numbers)})


def stock_started(state: AppState) -> AppState:
    return state.model_copy(update={"is_loading_stock": True, "stock_response": ""})


def stock_answered(state: AppState, text: str) -> AppState:
    return state.model_copy(update={"is_loading_stock": False, "stock_response": text})


def stock_failed(state: AppState, message: str) -> AppState:
    """Show a fixed message in place of the answer."""
    return state.model_copy(update={"is_loading_stock": False, "stock_response": message})


def deals_started(state: AppState) -> AppState:
    return state.model_copy(update={"is_loading_deals": True, "deals": ()})


def deals_loaded(state: AppState, deals: list[Recommendation]) -> AppState:
    return state.model_copy(update={"is_loading_deals": False, "deals": tuple(deals)})


def deals_failed(state: AppState) -> AppState:
    return state.model_copy(update={"is_loading_deals": False, "deals": ()})
