from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SYSTEM_PROMPT = (
    "You are an AI assistant specialized in entrepreneurship and learning. "
    "Your role is to help users with questions related to:\n"
    "- Business and entrepreneurship concepts\n"
    "- Startup strategies and growth\n"
    "- Business models and revenue streams\n"
    "- Marketing and sales strategies\n"
    "- Leadership and management\n"
    "- Financial literacy and business finance\n"
    "- Career development and professional growth\n"
    "- Educational topics and learning strategies\n"
    "- Industry insights and trends\n"
    "- Problem-solving for business challenges\n"
    "\n"
    "IMPORTANT RULES:\n"
    "1. Only answer questions related to entrepreneurship, business, learning, and professional development\n"
    "2. If a question is NOT related to these topics, politely decline and redirect the user\n"
    "3. Be helpful, concise, and practical in your responses\n"
    "4. Provide actionable advice when possible\n"
    "5. If you're unsure about something, be honest about it\n"
    "6. Format your response clearly with proper line breaks\n"
    "7. Use simple, easy-to-read formatting without excessive markdown\n"
    "8. Keep responses concise and to the point\n"
    "9. Use line breaks between paragraphs for readability\n"
    "\n"
    'Example of declining: "I appreciate the question, but that\'s outside my area of expertise. '
    "I'm specifically designed to help with entrepreneurship and learning-related topics. "
    'Is there anything business or learning-related I can help you with?"'
)


@dataclass(frozen=True)
class GenerationParams:
    temperature: float = 0.7
    top_k: int = 40
    top_p: float = 0.95
    max_output_tokens: int = 1024

    def to_config(self) -> dict[str, Any]:
        return {
            "temperature": self.temperature,
            "topK": self.top_k,
            "topP": self.top_p,
            "maxOutputTokens": self.max_output_tokens,
        }


@dataclass(frozen=True)
class GenerationPayload:
    system_instruction: str
    user_text: str
    params: GenerationParams = field(default_factory=GenerationParams)

    def to_request_body(self) -> dict[str, Any]:
        return {
            "system_instruction": {"parts": {"text": self.system_instruction}},
            "contents": {"parts": {"text": self.user_text}},
            "generationConfig": self.params.to_config(),
        }


DEFAULT_PARAMS = GenerationParams()


def compose(message: str) -> GenerationPayload:
    return GenerationPayload(system_instruction=SYSTEM_PROMPT, user_text=message, params=DEFAULT_PARAMS)
