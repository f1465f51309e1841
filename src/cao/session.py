"""Interactive and single-prompt chat loops."""

import asyncio
import logging
import shutil

import httpx

from cao.client import call_ai_api
from cao.models import Message, ModelConfig, Reply
from cao.personas import DEFAULT_PERSONA, PERSONAS, switch_guide

log = logging.getLogger(__name__)

_EXIT_COMMANDS = ("exit", "quit", "/exit", "/quit")

# Past MAX_HISTORY messages, keep the system prompt plus the last KEEP_RECENT
MAX_HISTORY = 20
KEEP_RECENT = 10


def print_block(text: str):
    width = min(shutil.get_terminal_size().columns, 80)
    rule = "─" * width
    print(f"\n{rule}\n{text}\n{rule}\n")


class Session:
    """Conversation history for one terminal session.

    The system prompt is always messages[0]; switching persona rewrites it in
    place so the rest of the history is kept.
    """

    def __init__(
        self,
        config: ModelConfig,
        persona: str = DEFAULT_PERSONA,
        client: httpx.AsyncClient | None = None,
    ):
        self.config = config
        self.client = client
        self.persona_key = persona
        p = PERSONAS[persona]
        self.messages: list[Message] = [
            Message("system", p.system_prompt),
            Message("assistant", p.greeting),
        ]

    @property
    def persona(self):
        return PERSONAS[self.persona_key]

    @property
    def prompt(self) -> str:
        return f"cao {self.persona.emoji} > "

    def switch(self, persona: str):
        self.persona_key = persona
        self.messages[0] = Message("system", self.persona.system_prompt)

    async def ask(self, text: str) -> Reply:
        self.messages.append(Message("user", text))
        reply = await call_ai_api(self.config, list(self.messages), client=self.client)
        if reply.ok:
            self.messages.append(Message("assistant", reply.text))
        else:
            # Keep the history answerable: drop the turn that got no reply
            self.messages.pop()
        self._trim()
        return reply

    def _trim(self):
        if len(self.messages) <= MAX_HISTORY:
            return
        system = [m for m in self.messages if m.role == "system"]
        self.messages = system + self.messages[-KEEP_RECENT:]
        log.debug("Trimmed history to system prompt + last %d messages", KEEP_RECENT)


def show_reply(session: Session, reply: Reply):
    p = session.persona
    print(f"\n{p.name}{p.emoji}:")
    print(reply.text or "(empty response)")
    print()


async def handle_line(session: Session, line: str) -> bool:
    """Process one input line. Returns False when the session should end."""
    text = line.strip()
    if text.lower() in _EXIT_COMMANDS:
        print("\nExiting chat")
        return False
    if not text:
        return True

    if text.startswith("/"):
        cmd, _, content = text[1:].partition(" ")
        cmd = cmd.lower()
        if cmd not in PERSONAS:
            print(f"\nUnknown command: {text}\n")
            return True
        session.switch(cmd)
        content = content.strip()
        if not content:
            print_block(f"Switched to {session.persona.name} {session.persona.emoji}")
            return True
        text = content

    show_reply(session, await session.ask(text))
    return True


async def run_interactive(config: ModelConfig, persona: str = DEFAULT_PERSONA):
    async with httpx.AsyncClient() as client:
        session = Session(config, persona, client=client)
        print_block(f"{session.persona.greeting}\n\n{switch_guide()}")
        while True:
            try:
                line = await asyncio.to_thread(input, session.prompt)
            except (EOFError, KeyboardInterrupt):
                print("\nExiting chat")
                return
            if not await handle_line(session, line):
                return


async def run_single_prompt(config: ModelConfig, prompt: str) -> Reply:
    messages = [
        Message("system", PERSONAS[DEFAULT_PERSONA].system_prompt),
        Message("user", prompt),
    ]
    log.debug("Single prompt: %s", prompt)
    print(f"\nYou: {prompt}\n")
    reply = await call_ai_api(config, messages)
    print_block(reply.text)
    return reply
