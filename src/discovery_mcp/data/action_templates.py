"""Static action template table.

Templates are defined once and listed under one or more domains. A template
listed under several domains is emitted at most once per result, under the
first (highest-priority) domain that selects it.
"""

from dataclasses import dataclass
from types import MappingProxyType

from discovery_mcp.models import ActionType, GoalCategory, PlanningDomain, ValueCategory


@dataclass(frozen=True)
class ActionConditions:
    """Eligibility requirements. Every set requirement must hold."""

    near_retirement: bool = False
    federal_employee: bool = False
    dependents: bool = False
    married: bool = False
    value_category: ValueCategory | None = None
    high_priority_goal_category: GoalCategory | None = None


@dataclass(frozen=True)
class ActionTemplate:
    id: str
    title: str
    description: str
    type: ActionType
    outcome: str
    # May contain {value} and {goal} placeholders
    rationale_template: str
    conditions: ActionConditions = ActionConditions()
    specialist: bool = False
    dependencies: tuple[str, ...] | None = None


@dataclass(frozen=True)
class DomainListing:
    """A template offered for a domain while that domain ranks at or above max_priority."""

    template_id: str
    max_priority: int = 9


_TEMPLATES: tuple[ActionTemplate, ...] = (
    # Retirement income
    ActionTemplate(
        id="retirement-income-sources",
        title="Review retirement income sources and timing",
        description=(
            "Understand all potential income sources (pensions, Social Security, investments) "
            "and when you can access them."
        ),
        type=ActionType.EDUCATION,
        outcome="Clear picture of retirement income options and optimal claiming strategies",
        rationale_template="This supports your priority of {value} and helps protect your goal of {goal}.",
    ),
    ActionTemplate(
        id="retirement-income-strategy",
        title="Compare retirement income strategies",
        description=(
            "Evaluate different approaches: guaranteed income vs. flexible withdrawals, "
            "timing of Social Security, pension options."
        ),
        type=ActionType.DECISION_PREP,
        outcome="Informed decision on income strategy that matches your priorities",
        rationale_template=(
            "With retirement approaching, understanding income options now prevents costly decisions later."
        ),
        conditions=ActionConditions(near_retirement=True),
        dependencies=("retirement-income-sources",),
    ),
    ActionTemplate(
        id="federal-retirement-analysis",
        title="Analyze federal retirement benefit options",
        description="Review FERS/CSRS benefits, TSP strategies, and timing considerations specific to federal employees.",
        type=ActionType.EDUCATION,
        outcome="Understanding of federal benefit optimization opportunities",
        rationale_template="Federal benefits have unique rules that require specialized analysis to maximize.",
        conditions=ActionConditions(federal_employee=True),
        specialist=True,
    ),
    ActionTemplate(
        id="spousal-survivor-benefits",
        title="Coordinate spousal and survivor benefits",
        description=(
            "Compare claiming ages, pension survivor elections, and joint income needs so both "
            "spouses stay covered."
        ),
        type=ActionType.DECISION_PREP,
        outcome="Income plan that protects the surviving spouse",
        rationale_template="Survivor elections are hard to change later and shape income for both of you.",
        conditions=ActionConditions(married=True),
    ),
    # Investment strategy
    ActionTemplate(
        id="investment-risk-review",
        title="Review investment allocation and risk level",
        description=(
            "Ensure your investment mix aligns with your time horizon, goals, and comfort with "
            "market fluctuations."
        ),
        type=ActionType.PROFESSIONAL_REVIEW,
        outcome="Investment strategy aligned with your values and timeline",
        rationale_template="Your {value} orientation suggests this review can ensure alignment.",
    ),
    ActionTemplate(
        id="investment-growth-focus",
        title="Evaluate growth opportunities in portfolio",
        description="Consider whether current allocation provides enough growth potential for your long-term goals.",
        type=ActionType.OPTIMIZATION,
        outcome="Portfolio positioned for long-term growth while managing risk",
        rationale_template="Growth is a core value, so ensuring your portfolio supports this is important.",
        conditions=ActionConditions(value_category=ValueCategory.GROWTH),
    ),
    # Tax optimization
    ActionTemplate(
        id="tax-strategy-review",
        title="Review tax-efficient strategies",
        description=(
            "Identify opportunities like Roth conversions, tax-loss harvesting, or charitable "
            "giving strategies."
        ),
        type=ActionType.OPTIMIZATION,
        outcome="Reduced lifetime tax burden while supporting your goals",
        rationale_template="Tax optimization can significantly impact long-term wealth and support {goal}.",
        specialist=True,
    ),
    ActionTemplate(
        id="roth-conversion-analysis",
        title="Evaluate Roth conversion opportunities",
        description=(
            "Determine if converting pre-tax retirement funds to Roth makes sense in current or "
            "future low-income years."
        ),
        type=ActionType.DECISION_PREP,
        outcome="Strategic tax positioning for retirement years",
        rationale_template="Pre-retirement years often offer conversion opportunities that disappear later.",
        conditions=ActionConditions(near_retirement=True),
        specialist=True,
    ),
    # Insurance and risk
    ActionTemplate(
        id="insurance-coverage-review",
        title="Review insurance coverage adequacy",
        description="Ensure life, disability, and property insurance appropriately protects your family and assets.",
        type=ActionType.PROFESSIONAL_REVIEW,
        outcome="Confidence that major risks are appropriately covered",
        rationale_template="Protecting {goal} requires adequate insurance coverage.",
    ),
    ActionTemplate(
        id="life-insurance-needs",
        title="Calculate life insurance needs",
        description="Determine appropriate coverage amount based on dependents, debts, and income replacement needs.",
        type=ActionType.DECISION_PREP,
        outcome="Right-sized life insurance to protect family",
        rationale_template="With dependents relying on you, adequate life insurance is essential.",
        conditions=ActionConditions(dependents=True),
    ),
    # Estate and legacy
    ActionTemplate(
        id="estate-documents-review",
        title="Review estate planning documents",
        description=(
            "Ensure will, powers of attorney, healthcare directives, and beneficiary designations "
            "are current."
        ),
        type=ActionType.PROFESSIONAL_REVIEW,
        outcome="Estate documents that reflect current wishes and family situation",
        rationale_template="Your {value} values make estate planning particularly important.",
        specialist=True,
    ),
    ActionTemplate(
        id="beneficiary-audit",
        title="Audit all beneficiary designations",
        description=(
            "Review beneficiaries on retirement accounts, life insurance, and other assets to "
            "ensure they match intentions."
        ),
        type=ActionType.STRUCTURAL,
        outcome="Assets will transfer to intended recipients",
        rationale_template=(
            "Outdated beneficiaries can override estate documents, causing unintended consequences."
        ),
    ),
    ActionTemplate(
        id="legacy-planning",
        title="Develop legacy and giving strategy",
        description="Consider how to incorporate charitable giving or family wealth transfer into your plan.",
        type=ActionType.DECISION_PREP,
        outcome="Structured approach to legacy that reflects your values",
        rationale_template=(
            "Contribution is a core value, so formalizing legacy plans supports what matters most."
        ),
        conditions=ActionConditions(value_category=ValueCategory.CONTRIBUTION),
    ),
    # Cash flow and debt
    ActionTemplate(
        id="emergency-fund-target",
        title="Establish emergency fund at target level",
        description=(
            "Build 3-6 months of expenses in accessible savings as a foundation for all other planning."
        ),
        type=ActionType.STRUCTURAL,
        outcome="Financial stability to handle unexpected expenses",
        rationale_template="An emergency fund provides the {value} foundation that supports all other goals.",
    ),
    ActionTemplate(
        id="debt-payoff-strategy",
        title="Create debt elimination strategy",
        description="Prioritize and plan payoff of high-interest debt before retirement.",
        type=ActionType.STRUCTURAL,
        outcome="Reduced fixed expenses entering retirement",
        rationale_template=(
            "Eliminating debt before retirement reduces income needs and increases flexibility."
        ),
        conditions=ActionConditions(near_retirement=True),
    ),
    # Benefits
    ActionTemplate(
        id="federal-benefits-analysis",
        title="Complete federal benefits analysis",
        description="Review FEHB, FEGLI, TSP, and pension options for optimal retirement positioning.",
        type=ActionType.EDUCATION,
        outcome="Maximized federal retirement benefits",
        rationale_template="Federal benefits require specialized knowledge to optimize effectively.",
        conditions=ActionConditions(federal_employee=True),
        specialist=True,
    ),
    ActionTemplate(
        id="employer-benefits-review",
        title="Review employer benefit utilization",
        description=(
            "Ensure you are maximizing employer matches, HSA contributions, and other workplace benefits."
        ),
        type=ActionType.OPTIMIZATION,
        outcome="Full utilization of available employer benefits",
        rationale_template="Unused employer benefits represent lost compensation.",
    ),
    # Healthcare and long-term care
    ActionTemplate(
        id="healthcare-transition-plan",
        title="Plan healthcare coverage transition",
        description="Understand Medicare options, employer retiree coverage, or marketplace alternatives.",
        type=ActionType.EDUCATION,
        outcome="Seamless healthcare coverage through retirement transition",
        rationale_template=(
            "Healthcare is one of the largest retirement expenses and requires advance planning."
        ),
        conditions=ActionConditions(near_retirement=True),
        specialist=True,
    ),
    ActionTemplate(
        id="ltc-insurance-evaluation",
        title="Evaluate long-term care planning options",
        description="Consider LTC insurance, self-insurance, or hybrid strategies for potential care needs.",
        type=ActionType.DECISION_PREP,
        outcome="Plan for potential long-term care needs",
        rationale_template=(
            "Health is a priority value, and LTC planning protects both health and financial security."
        ),
        conditions=ActionConditions(value_category=ValueCategory.HEALTH),
    ),
    # Business and career
    ActionTemplate(
        id="career-transition-planning",
        title="Develop career transition strategy",
        description="Plan for potential encore career, phased retirement, or full retirement transition.",
        type=ActionType.DECISION_PREP,
        outcome="Clear vision for work-life transition",
        rationale_template=(
            "Purpose is a core value, so planning how work fits into your next chapter is important."
        ),
        conditions=ActionConditions(value_category=ValueCategory.PURPOSE),
    ),
    ActionTemplate(
        id="career-growth-funding",
        title="Set aside funding for career growth",
        description=(
            "Earmark savings for training, certifications, or a business launch tied to your career goals."
        ),
        type=ActionType.STRUCTURAL,
        outcome="Career plans that are funded rather than postponed",
        rationale_template="Reaching {goal} is easier when the investment in yourself is planned for.",
        conditions=ActionConditions(high_priority_goal_category=GoalCategory.CAREER_GROWTH),
    ),
)

ACTION_TEMPLATES = MappingProxyType({template.id: template for template in _TEMPLATES})

# Per-domain listings, in the order templates are considered
DOMAIN_ACTION_TABLE = MappingProxyType({
    PlanningDomain.RETIREMENT_INCOME: (
        DomainListing("retirement-income-sources", max_priority=5),
        DomainListing("retirement-income-strategy", max_priority=3),
        DomainListing("federal-retirement-analysis", max_priority=5),
        DomainListing("federal-benefits-analysis", max_priority=5),
        DomainListing("spousal-survivor-benefits", max_priority=5),
        DomainListing("roth-conversion-analysis", max_priority=3),
    ),
    PlanningDomain.INVESTMENT_STRATEGY: (
        DomainListing("investment-risk-review", max_priority=5),
        DomainListing("investment-growth-focus", max_priority=4),
    ),
    PlanningDomain.TAX_OPTIMIZATION: (
        DomainListing("tax-strategy-review", max_priority=5),
        DomainListing("roth-conversion-analysis", max_priority=4),
    ),
    PlanningDomain.INSURANCE_RISK: (
        DomainListing("insurance-coverage-review", max_priority=5),
        DomainListing("life-insurance-needs", max_priority=5),
        DomainListing("beneficiary-audit", max_priority=5),
    ),
    PlanningDomain.ESTATE_LEGACY: (
        DomainListing("estate-documents-review", max_priority=5),
        DomainListing("beneficiary-audit", max_priority=6),
        DomainListing("legacy-planning", max_priority=4),
    ),
    PlanningDomain.CASH_FLOW_DEBT: (
        DomainListing("emergency-fund-target", max_priority=5),
        DomainListing("debt-payoff-strategy", max_priority=5),
    ),
    PlanningDomain.BENEFITS_OPTIMIZATION: (
        DomainListing("federal-benefits-analysis", max_priority=5),
        DomainListing("employer-benefits-review", max_priority=5),
        DomainListing("healthcare-transition-plan", max_priority=5),
    ),
    PlanningDomain.BUSINESS_CAREER: (
        DomainListing("career-transition-planning", max_priority=5),
        DomainListing("career-growth-funding", max_priority=5),
    ),
    PlanningDomain.HEALTHCARE_LTC: (
        DomainListing("healthcare-transition-plan", max_priority=4),
        DomainListing("ltc-insurance-evaluation", max_priority=5),
    ),
})
