# =============================================================================
# main.py  -  Interactive Entry Point for the Album Guide Agent
# =============================================================================
#
# HOW TO RUN:
#   pitchfork-list-agent          (console script)
#   python -m pitchfork_list.main
#
# ONE TURN OF THE CONVERSATION:
#
#   you type a question
#        |
#        v
#   Runner.run_async  ->  event stream
#        |                  - function_call      ->  "-> get_album_by_rank(rank=12)"
#        |                  - function_response  ->  "<- get_album_by_rank"
#        |                  - final response     ->  collected and printed
#        v
#   the guide's answer
#
# The MCP server is started by ADK as a subprocess (see agent/album_agent.py);
# this module only drives the conversation.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads the provider API key (e.g. OPENROUTER_API_KEY) from the
# environment when the agent is created, so .env must be loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from pitchfork_list.agent.album_agent import create_agent

APP_NAME = "pitchfork_list"
USER_ID = "listener"
EXIT_COMMANDS = ("quit", "exit", "q")
HELP_COMMANDS = ("help", "?")
RULE = "-" * 70

EXAMPLE_QUESTIONS = (
    "What's number 1 on the list?",
    "Which Radiohead albums made it?",
    "How many albums are from 2007, and what share of the list is that?",
    "Which artists placed more than one album?",
    "Give me an overview of the decade's most common genres.",
)


def format_tool_call(name: str, args: dict | None) -> str:
    """One console line for a tool call, e.g. ``get_album_by_rank(rank=12)``."""
    rendered = ", ".join(f"{key}={value!r}" for key, value in (args or {}).items())
    return f"{name}({rendered})"


def final_text(event) -> str:
    """Text of a final-response event, with its text parts joined."""
    if not event.content or not event.content.parts:
        return ""
    return "".join(part.text for part in event.content.parts if getattr(part, "text", None))


def _print_help() -> None:
    print("\nThings you can ask:")
    for question in EXAMPLE_QUESTIONS:
        print(f"  - {question}")
    print(f"Type one of {', '.join(EXIT_COMMANDS)} to leave.")


async def _ask(runner: Runner, session_id: str, question: str) -> str:
    """Send one question and return the guide's final answer."""
    message = types.Content(role="user", parts=[types.Part(text=question)])
    answer = ""

    async for event in runner.run_async(
        user_id=USER_ID, session_id=session_id, new_message=message
    ):
        for call in event.get_function_calls():
            print(f"  -> {format_tool_call(call.name, call.args)}")
        for response in event.get_function_responses():
            print(f"  <- {response.name}")
        if event.is_final_response():
            answer = final_text(event) or answer
    return answer


async def run_agent():
    """Run the album guide interactively until the listener quits."""
    print("=" * 70)
    print("  PITCHFORK: THE 200 BEST ALBUMS OF THE 2000s")
    print("  An album guide on Google ADK, backed by a FastMCP server")
    print("=" * 70)

    print("\nStarting the album guide...")
    agent = create_agent()
    session_service = InMemorySessionService()
    runner = Runner(agent=agent, app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)
    print("Ready. Type 'help' for example questions.")

    while True:
        try:
            question = input("\n🎧 > ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not question:
            continue
        if question.lower() in EXIT_COMMANDS:
            break
        if question.lower() in HELP_COMMANDS:
            _print_help()
            continue

        print(RULE)
        answer = await _ask(runner, session.id, question)
        print(RULE)
        print(f"\n{answer}" if answer else "\n(The guide gave no answer; check the server log on stderr.)")

    print("Bye.")


def main() -> None:
    asyncio.run(run_agent())


if __name__ == "__main__":
    main()
