from allocator.allocation_engine import ConsumerAllocationEngine
from allocator.logging_config import configure_logging
from allocator.onboarding_session import QUESTIONS, OnboardingSession
from allocator.strategy_explanation_engine import StrategyExplanationEngine


def _ask(session: OnboardingSession, question_id: str, prompt: str, options) -> bool:
    """Prompt until a valid answer is recorded. Returns False on 'exit'."""
    while True:
        print(f"\nBot: {prompt} ({' / '.join(options)})")
        user_input = input("You: ").strip()
        if user_input.lower() == "exit":
            return False
        try:
            session.answer(question_id, user_input)
            return True
        except ValueError:
            print(f"Bot: Please choose one of: {', '.join(options)}.")


def main():
    configure_logging()
    session = OnboardingSession()
    engine = ConsumerAllocationEngine()

    print("Welcome to Portfolio Allocator")
    print("Type 'exit' to quit.")

    for question_id, prompt, options in QUESTIONS:
        if not _ask(session, question_id, prompt, options):
            return
        split = session.preview()
        print(
            f"Bot: Your portfolio is taking shape: {split.stocks:g}% stocks / "
            f"{split.bonds:g}% bonds ({session.answered_count}/{len(QUESTIONS)} answered)"
        )

    finalized = session.finalize()
    strategy = engine.recommend_finalized(finalized)

    print(f"\nBot: Recommended strategy: {strategy.name}")
    print(f"Bot: Expected return {finalized.expected_return}, "
          f"volatility {finalized.volatility_level}.\n")

    explanation = StrategyExplanationEngine.explain(
        strategy,
        finalized.risk_score,
        finalized.timeline,
        finalized.allocation,
    )
    print(StrategyExplanationEngine.format_for_cli(explanation))


if __name__ == "__main__":
    main()
