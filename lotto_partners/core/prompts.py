from typing import Any, Literal


DealContext = Literal["lotto", "stock", "general"]

STOCK_FALLBACK_MESSAGE = "정보를 가져오는 데 실패했습니다. 다시 시도해주세요."

LOTTO_DEALS_PROMPT = "사람들이 로또 1등에 당첨되면 사고 싶어할 만한 흥미로운 상품 3가지를 추천해줘."
STOCK_DEALS_PROMPT = '"{query}"와(과) 관련된 주제의 책이나 생산성 향상 아이템 3가지를 추천해줘.'
GENERAL_DEALS_PROMPT = "요즘 인기 있는 가전제품, 생활용품, 또는 취미용품 3가지를 추천해줘."
DEALS_SUFFIX = "각 상품의 이름과 1-2문장의 짧고 매력적인 설명을 포함해줘."

RECOMMENDATION_CONFIG: dict[str, Any] = {
    "responseMimeType": "application/json",
    "responseSchema": {
        "type": "ARRAY",
        "items": {
            "type": "OBJECT",
            "properties": {
                "name": {"type": "STRING", "description": "상품 이름"},
                "description": {"type": "STRING", "description": "상품에 대한 짧은 설명"},
            },
            "required": ["name", "description"],
        },
    },
}


def stock_prompt(question: str) -> str:
    """Ask for a beginner-friendly explanation of a stock question."""
    return f'다음 주식 관련 질문에 대해 초보자가 이해하기 쉽게 간단히 설명해줘: "{question}"'


def deals_prompt(context: DealContext, query: str | None = None) -> str:
    """Build the recommendation prompt for the feature that triggered it."""
    if context == "lotto":
        prompt = LOTTO_DEALS_PROMPT
    elif context == "stock" and query:
        prompt = STOCK_DEALS_PROMPT.format(query=query)
    else:
        prompt = GENERAL_DEALS_PROMPT

    return f"{prompt} {DEALS_SUFFIX}"
