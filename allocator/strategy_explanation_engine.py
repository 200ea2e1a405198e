"""
allocator/strategy_explanation_engine.py
----------------------------------------
Deterministic "why this portfolio works for you" text for a selected
catalog strategy, with its projected outcomes and running costs.

Design contract:
  - Does NOT select strategies
  - Does NOT mutate holdings
  - Projected outcomes and market scenarios are display figures, linear in
    the risk score
  - Costs are weighted by the holdings' own percentages
  - Fully stateless (all methods are @staticmethod)
"""

from typing import Dict, Optional, Sequence, Union

import numpy as np

from allocator import config
from allocator import constants as C
from allocator.enums import TimelineBucket
from allocator.models import StockBondSplit, Strategy
from allocator.risk_classifier import bucket_timeline

# Asset-class keywords counted on the bond side of the stock-to-bond ratio.
_DEFENSIVE_KEYWORDS = ("bond", "cash", "inflation")


class StrategyExplanationEngine:
    """
    Produce structured explanations for a recommended strategy.

    Entry point::

        explanation = StrategyExplanationEngine.explain(
            strategy, risk_score=50, timeline="6-10 years",
            investment_amount=25_000,
        )

        Returns a dict with seven string sections:
        ``summary``             – one-line overview
        ``allocation_table``    – ASCII breakdown table
        ``strategy_rationale``  – goal, horizon and risk level in one paragraph
        ``risk_profile``        – Conservative / Moderate / Aggressive note
        ``projected_outcomes``  – return, volatility, diversification, scenarios
        ``cost_estimate``       – average expense ratio and annual fees
        ``final_statement``     – closing sentence
    """

    # ------------------------------------------------------------------ #
    #  Public entry point
    # ------------------------------------------------------------------ #

    @staticmethod
    def explain(
        strategy: Strategy,
        risk_score: float,
        timeline: Union[TimelineBucket, str, None],
        split: Optional[StockBondSplit] = None,
        investment_amount: Optional[float] = None,
    ) -> Dict[str, str]:
        """
        Build the full explanation for *strategy*.

        Parameters
        ----------
        strategy:
            Strategy returned by the classifier.
        risk_score:
            Investor risk score, 0-100.
        timeline:
            A :class:`TimelineBucket`, or the free-text horizon label.  A
            label is phrased as given ("3-5 years") where it is recognised.
        split:
            Stock / bond split to quote.  Derived from the holdings' asset
            classes when omitted.
        investment_amount:
            Amount used for the annual-fee figure.  Without it the cost
            section only reports the average expense ratio.

        Returns
        -------
        Dict[str, str]  with keys ``summary``, ``allocation_table``,
        ``strategy_rationale``, ``risk_profile``, ``projected_outcomes``,
        ``cost_estimate``, ``final_statement``.
        """
        if split is None:
            split = StrategyExplanationEngine.stock_bond_split(strategy)

        return {
            "summary":            StrategyExplanationEngine._summary(strategy),
            "allocation_table":   StrategyExplanationEngine._allocation_table(strategy),
            "strategy_rationale": StrategyExplanationEngine._strategy_rationale(
                                      strategy, risk_score, timeline, split
                                  ),
            "risk_profile":       StrategyExplanationEngine._risk_profile(risk_score),
            "projected_outcomes": StrategyExplanationEngine._projected_outcomes(risk_score),
            "cost_estimate":      StrategyExplanationEngine._cost_estimate(
                                      strategy, investment_amount
                                  ),
            "final_statement":    StrategyExplanationEngine._final_statement(strategy, risk_score),
        }

    # ------------------------------------------------------------------ #
    #  Derived figures
    # ------------------------------------------------------------------ #

    @staticmethod
    def risk_level(risk_score: float) -> str:
        """Conservative (<= 30), Moderate (<= 60) or Aggressive."""
        if risk_score <= config.RISK_LEVEL_CONSERVATIVE_MAX:
            return "Conservative"
        if risk_score <= config.RISK_LEVEL_MODERATE_MAX:
            return "Moderate"
        return "Aggressive"

    @staticmethod
    def goal_context(strategy_name: str) -> str:
        """Goal phrase inferred from the strategy name."""
        name = strategy_name.lower()
        for keywords, goal in C.GOAL_NAME_KEYWORDS:
            if any(k in name for k in keywords):
                return C.GOAL_CONTEXT[goal]
        return C.DEFAULT_GOAL_CONTEXT

    @staticmethod
    def timeline_context(timeline: Union[TimelineBucket, str, None]) -> str:
        """
        Horizon phrase for *timeline*.

        Labels keep their own granularity ("3-5 years", "5-10 years");
        unrecognised labels and bare buckets use the bucket's phrase.
        """
        if isinstance(timeline, TimelineBucket):
            return C.TIMELINE_CONTEXT[timeline]

        label = (timeline or "").strip().lower()
        for keywords, phrase in C.TIMELINE_PHRASES:
            if any(k in label for k in keywords):
                return phrase
        return C.TIMELINE_CONTEXT[bucket_timeline(label)]

    @staticmethod
    def projected_outcomes(risk_score: float) -> Dict[str, float]:
        """
        ``expected_return`` and ``volatility`` in % p.a., and a 0-100
        ``diversification`` score.
        """
        fraction = risk_score / 100
        return {
            "expected_return": config.EXPECTED_RETURN_BASE + fraction * config.EXPECTED_RETURN_SPAN,
            "volatility":      config.VOLATILITY_BASE + fraction * config.VOLATILITY_SPAN,
            "diversification": max(
                config.DIVERSIFICATION_FLOOR,
                100 - risk_score * config.DIVERSIFICATION_PENALTY,
            ),
        }

    @staticmethod
    def market_scenarios(risk_score: float) -> Dict[str, float]:
        """
        Illustrative one-year returns in %::

            bull   = expected + 1.5 * volatility
            normal = expected
            bear   = -1.2 * volatility
            range  = volatility          (shown as +/-)
        """
        outcomes = StrategyExplanationEngine.projected_outcomes(risk_score)
        expected = outcomes["expected_return"]
        volatility = outcomes["volatility"]
        return {
            "bull":   expected + volatility * config.BULL_VOLATILITY_MULTIPLIER,
            "normal": expected,
            "bear":   -volatility * config.BEAR_VOLATILITY_MULTIPLIER,
            "range":  volatility,
        }

    @staticmethod
    def suitability(risk_score: float) -> str:
        """Who the portfolio suits, split at 30 and 60."""
        if risk_score > config.RISK_LEVEL_MODERATE_MAX:
            return (
                "can stay invested through significant market downturns, have a long "
                "time horizon, and prioritize maximum growth over short-term stability"
            )
        if risk_score <= config.RISK_LEVEL_CONSERVATIVE_MAX:
            return (
                "prioritize capital preservation, may need access to funds within 3-5 "
                "years, or prefer predictable, modest returns over volatile growth"
            )
        return (
            "want meaningful growth potential while maintaining reasonable stability, "
            "have a medium-term timeline, and can tolerate moderate market fluctuations"
        )

    @staticmethod
    def expense_ratio(symbol: str) -> float:
        """Known expense ratio (% p.a.) for *symbol*, else the default."""
        return C.EXPENSE_RATIOS.get(symbol.upper(), config.DEFAULT_EXPENSE_RATIO)

    @staticmethod
    def average_expense_ratio(holdings: Sequence) -> float:
        """
        Allocation-weighted expense ratio of *holdings* (holdings or
        entries), rounded to 2 dp.  Empty or zero-weight input gets the
        default ratio.
        """
        weights = np.asarray([h.percentage for h in holdings], dtype=float)
        if weights.size == 0 or weights.sum() <= 0:
            return config.DEFAULT_EXPENSE_RATIO
        ratios = np.asarray(
            [StrategyExplanationEngine.expense_ratio(h.symbol) for h in holdings], dtype=float
        )
        return round(float(np.average(ratios, weights=weights)), config.EXPENSE_RATIO_DECIMALS)

    @staticmethod
    def cost_estimate(holdings: Sequence, investment_amount: float) -> Dict[str, float]:
        """
        ``expense_ratio`` (% p.a., rounded as displayed) and the
        ``annual_fees`` it implies on *investment_amount*.
        """
        ratio = StrategyExplanationEngine.average_expense_ratio(holdings)
        return {
            "expense_ratio": ratio,
            "annual_fees":   investment_amount * ratio / 100,
        }

    @staticmethod
    def stock_bond_split(strategy: Strategy) -> StockBondSplit:
        """Bonds, cash and inflation-protected holdings on one side; the rest is stocks."""
        bonds = sum(
            h.percentage for h in strategy.holdings
            if any(k in h.asset_class.lower() for k in _DEFENSIVE_KEYWORDS)
        )
        return StockBondSplit(strategy.total() - bonds, bonds)

    # ------------------------------------------------------------------ #
    #  Section builders
    # ------------------------------------------------------------------ #

    @staticmethod
    def _summary(strategy: Strategy) -> str:
        top = max(strategy.holdings, key=lambda h: h.percentage)
        count = len(strategy.holdings)
        return (
            f"{strategy.name}: {count} holding{'s' if count != 1 else ''}. "
            f"Largest position: {top.symbol} ({top.percentage:g}%)."
        )

    @staticmethod
    def _allocation_table(strategy: Strategy) -> str:
        """Fixed-width ASCII table: Symbol | Asset Class | Allocation."""
        lines = ["Symbol   Asset Class                 Allocation"]
        for h in strategy.holdings:
            lines.append(f"{h.symbol:<8} {h.asset_class:<27} {h.percentage:>6.1f}%")
        return "\n".join(lines)

    @staticmethod
    def _strategy_rationale(
        strategy: Strategy,
        risk_score: float,
        timeline: Union[TimelineBucket, str, None],
        split: StockBondSplit,
    ) -> str:
        name = strategy.name.lower()
        level = StrategyExplanationEngine.risk_level(risk_score)

        if "income" in name:
            aim = "generate regular income"
        elif "conservative" in name:
            aim = "protect your capital while maintaining modest growth"
        else:
            aim = "achieve meaningful growth"

        return (
            f"Because you're {StrategyExplanationEngine.goal_context(strategy.name)} "
            f"with a {StrategyExplanationEngine.timeline_context(timeline)} time horizon, "
            f"this {level.lower()} portfolio {_RISK_DESCRIPTION[level]}. "
            f"The {split.stocks:g}/{split.bonds:g} stock-to-bond ratio reflects this "
            f"strategy, positioning you to {aim} while managing risk appropriately "
            f"for your timeline."
        )

    @staticmethod
    def _risk_profile(risk_score: float) -> str:
        level = StrategyExplanationEngine.risk_level(risk_score)
        return f"Risk profile: {level} (score {risk_score:g}/100). This portfolio {_RISK_DESCRIPTION[level]}."

    @staticmethod
    def _projected_outcomes(risk_score: float) -> str:
        outcomes = StrategyExplanationEngine.projected_outcomes(risk_score)
        scenarios = StrategyExplanationEngine.market_scenarios(risk_score)
        sep = "-" * 46
        return "\n".join([
            sep,
            "  Projected Outcomes",
            sep,
            f"  Expected Return      : {outcomes['expected_return']:>6.1f}%",
            f"  Volatility           : {outcomes['volatility']:>6.1f}%",
            f"  Diversification      : {outcomes['diversification']:>6.0f}/100",
            sep,
            f"  Bull Market          : {scenarios['bull']:>+5.0f}%",
            f"  Normal Year          : {scenarios['normal']:>+5.0f}%",
            f"  Bear Market          : {scenarios['bear']:>+5.0f}%",
            f"  Yearly Range         :   ±{scenarios['range']:.0f}%",
            sep,
            f"  Best suited for investors who {StrategyExplanationEngine.suitability(risk_score)}.",
        ])

    @staticmethod
    def _cost_estimate(strategy: Strategy, investment_amount: Optional[float]) -> str:
        ratio = StrategyExplanationEngine.average_expense_ratio(strategy.holdings)
        lines = [f"Average expense ratio: {ratio:.2f}% per year."]
        if investment_amount is not None:
            fees = StrategyExplanationEngine.cost_estimate(strategy.holdings, investment_amount)
            lines.append(
                f"Estimated annual fees on ${investment_amount:,.2f}: "
                f"${fees['annual_fees']:,.2f}."
            )
        return "\n".join(lines)

    @staticmethod
    def _final_statement(strategy: Strategy, risk_score: float) -> str:
        level = StrategyExplanationEngine.risk_level(risk_score)
        top = max(strategy.holdings, key=lambda h: h.percentage)
        if level == "Conservative":
            return f"{strategy.name} prioritises stability, anchored by {top.symbol}."
        if level == "Aggressive":
            return f"{strategy.name} leans into growth, led by {top.symbol}."
        return f"{strategy.name} balances growth and stability with {top.symbol} as the core holding."

    # ------------------------------------------------------------------ #
    #  CLI formatter
    # ------------------------------------------------------------------ #

    @staticmethod
    def format_for_cli(explanation: Dict[str, str]) -> str:
        """Render all sections as a single printable string."""
        sections = [
            "=== Why This Portfolio Works for You ===",
            explanation["summary"],
            "",
            explanation["allocation_table"],
            "",
            explanation["strategy_rationale"],
            "",
            explanation["risk_profile"],
            "",
            explanation["projected_outcomes"],
            "",
            "--- Expected Costs ---",
            explanation["cost_estimate"],
            "",
            explanation["final_statement"],
        ]
        return "\n".join(sections)


_RISK_DESCRIPTION: Dict[str, str] = {
    "Conservative": "prioritizes stability and capital preservation with modest growth expectations",
    "Moderate":     "balances growth potential with downside protection",
    "Aggressive":   "maximizes long-term growth potential and accepts higher short-term volatility",
}
