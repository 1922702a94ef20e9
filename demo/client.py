"""
CLI Demo Client for AJIS

Runs the assistant in-process and shows how each request was
classified, what was extracted and how it was answered.
"""

import asyncio
import os
import sys
from typing import Optional

# Add parent to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ajis.agent import AssistantAgent, AssistantResult
from ajis.handlers import OutcomeKind
from common.config import Settings
from common.logging_config import configure_logging


class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"

    BG_BLUE = "\033[44m"


OUTCOME_STYLES = {
    OutcomeKind.ANSWER: (Colors.GREEN, "✅"),
    OutcomeKind.MISSING_ENTITY: (Colors.MAGENTA, "❓"),
    OutcomeKind.UNAVAILABLE: (Colors.YELLOW, "🔎"),
    OutcomeKind.INVALID_INPUT: (Colors.RED, "❌"),
}


def print_header():
    """Print demo header."""
    print(f"""
{Colors.BOLD}{Colors.CYAN}╔══════════════════════════════════════════════════════════════════╗
║       AJIS - Adaptive anime assistant                            ║
║                                                                  ║
║  Ask for recaps, title info, or where to watch / read.           ║
╚══════════════════════════════════════════════════════════════════╝{Colors.RESET}
""")


def format_result(result: AssistantResult, response: str) -> str:
    """Format one processed request for display."""
    color, icon = OUTCOME_STYLES.get(result.outcome.kind, (Colors.WHITE, "•"))

    lines = []
    if result.intent_result:
        keyword = result.intent_result.matched_keyword or "default"
        lines.append(
            f"{Colors.DIM}intent:{Colors.RESET} {result.intent_result.intent.value.upper()} "
            f"{Colors.DIM}(keyword: {keyword}){Colors.RESET}"
        )
    if result.entities:
        lines.append(
            f"{Colors.DIM}title:{Colors.RESET} {result.entities.title or '-'}  "
            f"{Colors.DIM}episode:{Colors.RESET} {result.entities.episode or '-'}"
        )
    lines.append(f"{icon} {color}{result.outcome.kind.value.upper()}{Colors.RESET}")
    lines.append(response)
    return "\n".join(lines)


async def send_request(agent: AssistantAgent, text: str, persona: Optional[str]) -> None:
    """Process a request and display the outcome."""
    print(f"\n{Colors.BOLD}Request:{Colors.RESET} {text}")
    print(f"{Colors.DIM}{'─' * 60}{Colors.RESET}")

    result = await agent.process(text)
    print(format_result(result, agent.format(result, persona)))


async def interactive_mode(agent: AssistantAgent, persona: Optional[str]):
    """Run interactive demo mode."""
    print_header()

    print(f"""
{Colors.BOLD}Sample requests to try:{Colors.RESET}
  • "what is Frieren"
  • "recap Cowboy Bebop episode 5"
  • "where can I watch Mushishi"
  • "help"

{Colors.DIM}Type 'quit' or 'exit' to stop, 'clear' to clear screen{Colors.RESET}
""")

    while True:
        try:
            print(f"\n{Colors.BOLD}{Colors.CYAN}Enter your request:{Colors.RESET}")
            user_input = input("> ").strip()

            if not user_input:
                continue

            if user_input.lower() in ("quit", "exit", "q"):
                print(f"\n{Colors.GREEN}Goodbye!{Colors.RESET}")
                break

            if user_input.lower() == "clear":
                os.system("clear" if os.name == "posix" else "cls")
                print_header()
                continue

            await send_request(agent, user_input, persona)

        except KeyboardInterrupt:
            print(f"\n{Colors.GREEN}Goodbye!{Colors.RESET}")
            break
        except EOFError:
            break


async def demo_mode(agent: AssistantAgent, persona: Optional[str]):
    """Run automated demo with sample requests."""
    print_header()

    demo_requests = [
        ("Info Request", "what is Frieren"),
        ("Recap Request", "what happened in Cowboy Bebop episode 5"),
        ("Recap Without Title", "recap"),
        ("Where Request", "where can I watch Mushishi"),
        ("Support Request", "help"),
    ]

    for title, request in demo_requests:
        print(f"\n{Colors.BOLD}{Colors.BG_BLUE} {title} {Colors.RESET}")
        await send_request(agent, request, persona)
        print(f"\n{Colors.DIM}{'═' * 60}{Colors.RESET}")


async def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="AJIS Demo Client")
    parser.add_argument("--persona", type=str, default=None, help="Persona name (Static or Steele)")
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Run automated demo instead of interactive mode",
    )
    args = parser.parse_args()

    settings = Settings.from_env()
    configure_logging(settings.log_level)

    async with AssistantAgent.from_settings(settings) as agent:
        if args.demo:
            await demo_mode(agent, args.persona)
        else:
            await interactive_mode(agent, args.persona)


if __name__ == "__main__":
    asyncio.run(main())
