"""LangGraph node factories for laosplit integration."""

from langchain_core.runnables import RunnableLambda
from ...core.abc import Segmenter
from .state_keys import USER_INPUT, LAO_TOKENS

def make_segment_node(segmenter: Segmenter,
                      text_key: str = USER_INPUT,
                      tokens_key: str = LAO_TOKENS):
    """
    Create a LangGraph node that segments Lao text from the graph state.
    
    Args:
        segmenter: Any Segmenter, typically a LaoWordSegmenter
        text_key: State key containing the text to segment
        tokens_key: State key the token list is written to
        
    Returns:
        RunnableLambda: Node that adds the token list to state
    """
    def _segment_text(state):
        text = state.get(text_key, "")
        return {tokens_key: segmenter.segment(text)}
    
    return RunnableLambda(_segment_text)
