from app.constants.responders import MESSAGE_MAX_LENGTH


class GeneratePrompt:
    """Prompt sent to http-generate responders."""

    SYSTEM = (
        "You are a friendly and polite chat assistant. "
        "Answer in a calm, helpful tone. "
        f"Your whole answer must fit in {MESSAGE_MAX_LENGTH} characters. "
        "Reply with the answer only."
    )

    TEMPLATE = "<|system|>\n{system}\n<|user|>\n{content}\n<|assistant|>\n"

    @classmethod
    def render(cls, content: str) -> str:
        return cls.TEMPLATE.format(system=cls.SYSTEM, content=content)
