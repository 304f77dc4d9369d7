# =============================================================================
# main.py  -  Console Entry Point for the Books Mandala Assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
#   Needs BM_API_KEY (catalog) and your model provider's key, e.g.
#   OPENROUTER_API_KEY, in the environment or in .env.
#
# WHAT HAPPENS:
#   1. Creates the ADK agent (agent/bookstore_agent.py), which launches the
#      catalog tool server as a stdio subprocess
#   2. Opens an in-memory session
#   3. Loops: read a question, stream the agent's events, print the answer
#
# Tool calls are echoed as they happen so you can see which catalog tool the
# agent picked for each question.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# Load .env BEFORE creating the agent: LiteLlm reads the provider key when
# it initialises, and the tool subprocess inherits BM_API_KEY from us.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.bookstore_agent import create_agent

APP_NAME = "books_mandala_assistant"
USER_ID = "console_user"


async def run_agent():
    """Run the bookstore assistant interactively until the user quits."""
    print("=" * 70)
    print("  BOOKS MANDALA ASSISTANT")
    print("  Google ADK + LiteLlm + FastMCP catalog tools")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent ready!\n")
    print("💬 Ask about books, authors, genres, bestsellers...")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Looking that up...\n")
        print("-" * 70)

        # Keep the last text part: earlier ones are the agent thinking aloud
        # between tool calls.
        final_response = ""
        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if getattr(part, "text", None):
                        final_response = part.text

                    if getattr(part, "function_call", None):
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Assistant:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have hit an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
