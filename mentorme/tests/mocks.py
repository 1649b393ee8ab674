import asyncio


class FakeMessage:
    def __init__(self, content: str):
        self.content = content

class FakeChoice:
    def __init__(self, content: str):
        self.message = FakeMessage(content)

class FakeCompletion:
    def __init__(self, content: str):
        self.choices = [FakeChoice(content)]

class FakeCompletions:
    def __init__(self, content: str):
        self.content = content
        self.calls = []

    async def create(self, *args, **kwargs):
        self.calls.append(kwargs)
        return FakeCompletion(self.content)

class FakeChat:
    def __init__(self, content: str):
        self.completions = FakeCompletions(content)

class FakeAsyncGroq:
    def __init__(self, content: str = '"Career Growth."'):
        self.chat = FakeChat(content)


class StubSummarizer:
    """Records calls and returns a canned reply (or raises / stalls)."""

    def __init__(self, reply=None, *, error: Exception = None, delay: float = 0.0):
        self.reply = reply
        self.error = error
        self.delay = delay
        self.calls = []

    async def summarize(self, texts, *, task, hints=None):
        self.calls.append({"texts": list(texts), "task": task, "hints": hints})
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        if isinstance(self.reply, dict):
            return self.reply.get(task)
        return self.reply
