"""Planning domain catalog and domain boost tables."""

from types import MappingProxyType

from discovery_mcp.models import GoalCategory, PlanningDomain, ValueCategory

# Tie-break order for equal scores. Shared by every ranking.
DOMAIN_ORDER: tuple[PlanningDomain, ...] = (
    PlanningDomain.RETIREMENT_INCOME,
    PlanningDomain.INVESTMENT_STRATEGY,
    PlanningDomain.TAX_OPTIMIZATION,
    PlanningDomain.INSURANCE_RISK,
    PlanningDomain.ESTATE_LEGACY,
    PlanningDomain.CASH_FLOW_DEBT,
    PlanningDomain.BENEFITS_OPTIMIZATION,
    PlanningDomain.BUSINESS_CAREER,
    PlanningDomain.HEALTHCARE_LTC,
)

DOMAIN_LABELS = MappingProxyType({
    PlanningDomain.RETIREMENT_INCOME: "Retirement Income Strategy",
    PlanningDomain.INVESTMENT_STRATEGY: "Investment Strategy",
    PlanningDomain.TAX_OPTIMIZATION: "Tax Optimization",
    PlanningDomain.INSURANCE_RISK: "Insurance & Risk Management",
    PlanningDomain.ESTATE_LEGACY: "Estate & Legacy Planning",
    PlanningDomain.CASH_FLOW_DEBT: "Cash Flow & Debt Management",
    PlanningDomain.BENEFITS_OPTIMIZATION: "Benefits Optimization",
    PlanningDomain.BUSINESS_CAREER: "Business & Career Strategy",
    PlanningDomain.HEALTHCARE_LTC: "Healthcare & Long-Term Care",
})

DOMAIN_DESCRIPTIONS = MappingProxyType({
    PlanningDomain.RETIREMENT_INCOME: "Turning savings, pensions and Social Security into dependable retirement income.",
    PlanningDomain.INVESTMENT_STRATEGY: "Aligning investment mix and risk with time horizon and goals.",
    PlanningDomain.TAX_OPTIMIZATION: "Reducing lifetime taxes across accounts, withdrawals and giving.",
    PlanningDomain.INSURANCE_RISK: "Protecting income, family and assets against major setbacks.",
    PlanningDomain.ESTATE_LEGACY: "Wills, beneficiaries and the transfer of wealth and values.",
    PlanningDomain.CASH_FLOW_DEBT: "Spending, savings, emergency reserves and debt payoff.",
    PlanningDomain.BENEFITS_OPTIMIZATION: "Getting full value from employer and federal benefit programs.",
    PlanningDomain.BUSINESS_CAREER: "Career moves, business ownership and work-life transitions.",
    PlanningDomain.HEALTHCARE_LTC: "Health coverage through retirement and long-term care readiness.",
})

# Value category -> domains it raises
VALUE_DOMAIN_MAP = MappingProxyType({
    ValueCategory.SECURITY: (
        PlanningDomain.RETIREMENT_INCOME,
        PlanningDomain.INSURANCE_RISK,
        PlanningDomain.CASH_FLOW_DEBT,
    ),
    ValueCategory.FREEDOM: (
        PlanningDomain.INVESTMENT_STRATEGY,
        PlanningDomain.CASH_FLOW_DEBT,
        PlanningDomain.RETIREMENT_INCOME,
    ),
    ValueCategory.FAMILY: (
        PlanningDomain.ESTATE_LEGACY,
        PlanningDomain.INSURANCE_RISK,
        PlanningDomain.HEALTHCARE_LTC,
    ),
    ValueCategory.GROWTH: (
        PlanningDomain.INVESTMENT_STRATEGY,
        PlanningDomain.TAX_OPTIMIZATION,
        PlanningDomain.BUSINESS_CAREER,
    ),
    ValueCategory.CONTROL: (
        PlanningDomain.CASH_FLOW_DEBT,
        PlanningDomain.TAX_OPTIMIZATION,
        PlanningDomain.INVESTMENT_STRATEGY,
    ),
    ValueCategory.HEALTH: (
        PlanningDomain.HEALTHCARE_LTC,
        PlanningDomain.INSURANCE_RISK,
    ),
    ValueCategory.CONTRIBUTION: (
        PlanningDomain.ESTATE_LEGACY,
        PlanningDomain.TAX_OPTIMIZATION,
    ),
    ValueCategory.PURPOSE: (
        PlanningDomain.BUSINESS_CAREER,
        PlanningDomain.ESTATE_LEGACY,
    ),
    ValueCategory.QUALITY_OF_LIFE: (
        PlanningDomain.RETIREMENT_INCOME,
        PlanningDomain.CASH_FLOW_DEBT,
        PlanningDomain.HEALTHCARE_LTC,
    ),
})

# Goal category -> domains it raises
GOAL_DOMAIN_MAP = MappingProxyType({
    GoalCategory.RETIREMENT: (
        PlanningDomain.RETIREMENT_INCOME,
        PlanningDomain.INVESTMENT_STRATEGY,
        PlanningDomain.TAX_OPTIMIZATION,
    ),
    GoalCategory.FAMILY_LEGACY: (
        PlanningDomain.ESTATE_LEGACY,
        PlanningDomain.INSURANCE_RISK,
        PlanningDomain.CASH_FLOW_DEBT,
    ),
    GoalCategory.LIFESTYLE: (
        PlanningDomain.CASH_FLOW_DEBT,
        PlanningDomain.INVESTMENT_STRATEGY,
    ),
    GoalCategory.SECURITY_PROTECTION: (
        PlanningDomain.INSURANCE_RISK,
        PlanningDomain.CASH_FLOW_DEBT,
        PlanningDomain.RETIREMENT_INCOME,
    ),
    GoalCategory.GIVING: (
        PlanningDomain.ESTATE_LEGACY,
        PlanningDomain.TAX_OPTIMIZATION,
    ),
    GoalCategory.CAREER_GROWTH: (
        PlanningDomain.BUSINESS_CAREER,
        PlanningDomain.BENEFITS_OPTIMIZATION,
    ),
    GoalCategory.HEALTH: (
        PlanningDomain.HEALTHCARE_LTC,
        PlanningDomain.INSURANCE_RISK,
    ),
    GoalCategory.MAJOR_PURCHASES: (
        PlanningDomain.CASH_FLOW_DEBT,
        PlanningDomain.INVESTMENT_STRATEGY,
    ),
})

# Near-term spending goals are a cash-flow question only
SHORT_HORIZON_GOAL_DOMAIN_OVERRIDES = MappingProxyType({
    GoalCategory.MAJOR_PURCHASES: (PlanningDomain.CASH_FLOW_DEBT,),
    GoalCategory.LIFESTYLE: (PlanningDomain.CASH_FLOW_DEBT,),
})


def domain_rank(domain: PlanningDomain) -> int:
    """Position of a domain in the tie-break order."""
    return DOMAIN_ORDER.index(domain)
