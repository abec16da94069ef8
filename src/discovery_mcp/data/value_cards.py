"""Static value-card catalog.

Each card belongs to exactly one value category. Categories are internal;
clients only ever see card titles.
"""

from dataclasses import dataclass
from types import MappingProxyType

from discovery_mcp.models import ValueCategory


@dataclass(frozen=True)
class ValueCard:
    """A single sortable value card."""

    id: str
    title: str
    description: str
    category: ValueCategory

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category.value,
        }


# Card id prefix -> category
_PREFIX_CATEGORY = {
    "security": ValueCategory.SECURITY,
    "freedom": ValueCategory.FREEDOM,
    "family": ValueCategory.FAMILY,
    "growth": ValueCategory.GROWTH,
    "contribution": ValueCategory.CONTRIBUTION,
    "purpose": ValueCategory.PURPOSE,
    "control": ValueCategory.CONTROL,
    "health": ValueCategory.HEALTH,
    "qol": ValueCategory.QUALITY_OF_LIFE,
}

# (id, title, description)
_CARD_ROWS: tuple[tuple[str, str, str], ...] = (
    ("security_financial_security", "Financial security", "Having enough resources to handle life without financial stress."),
    ("security_emergency_preparedness", "Emergency preparedness", "Having reserves and plans to handle unexpected expenses without panic."),
    ("security_stable_income", "Stable income", "Having predictable, reliable income you can count on."),
    ("security_predictable_expenses", "Predictable expenses", "Knowing what your costs will be month to month."),
    ("security_insurance_protection", "Insurance protection", "Having proper coverage to protect against major financial setbacks."),
    ("security_risk_management", "Risk management", "Having strategies to minimize financial risks and protect what you have."),
    ("security_debt_reduction", "Debt reduction", "Eliminating debts to reduce financial obligations and stress."),
    ("security_guaranteed_retirement_income", "Guaranteed income in retirement", "Having income you cannot outlive, no matter how long you live."),
    ("security_safe_investments", "Safe investments", "Keeping money in lower-risk options that protect principal."),
    ("security_protection_for_dependents", "Protection for dependents", "Ensuring those who depend on you are financially protected."),
    ("security_housing_stability", "Housing stability", "Having a secure, stable place to live without financial strain."),
    ("security_long_term_care_readiness", "Long-term care readiness", "Being prepared for potential long-term care needs later in life."),
    ("freedom_financial_independence", "Financial independence", "Having enough resources that work is optional, not required."),
    ("freedom_work_optional", "Work-optional lifestyle", "Having the choice to work because you want to, not because you have to."),
    ("freedom_flexible_schedule", "Flexible schedule", "Having control over when and how you spend your time."),
    ("freedom_ability_to_travel", "Ability to travel", "Having the resources and flexibility to travel when you want."),
    ("freedom_location_independence", "Location independence", "Having the freedom to live or work from anywhere."),
    ("freedom_early_retirement_option", "Early retirement option", "Having the ability to retire before traditional retirement age."),
    ("freedom_career_change_choice", "Choice in career changes", "Having the financial flexibility to change careers or pursue new paths."),
    ("freedom_saying_no", "Saying no to unwanted work", "Having the ability to decline work that does not align with your values."),
    ("freedom_time_autonomy", "Time autonomy", "Having complete control over how you allocate your time."),
    ("freedom_lifestyle_flexibility", "Lifestyle flexibility", "Having options to adjust your lifestyle based on changing preferences."),
    ("family_providing_for_children", "Providing for children", "Ensuring your children have what they need to thrive."),
    ("family_supporting_spouse", "Supporting spouse or partner", "Ensuring your spouse or partner is financially secure."),
    ("family_college_funding", "College funding", "Helping children or grandchildren with education costs."),
    ("family_caring_for_parents", "Caring for aging parents", "Being able to support aging parents financially or with time."),
    ("family_traditions_experiences", "Family traditions and experiences", "Creating and maintaining meaningful family experiences together."),
    ("family_inheritance_planning", "Inheritance planning", "Leaving assets or wealth to the next generation."),
    ("family_generational_stability", "Generational stability", "Breaking cycles and building lasting family financial health."),
    ("family_vacations", "Family vacations", "Having resources for meaningful family travel and time together."),
    ("family_keeping_home", "Keeping the family home", "Maintaining a family residence that holds meaning and memories."),
    ("family_present_for_milestones", "Being present for milestones", "Having time and resources to be there for important family moments."),
    ("growth_career_advancement", "Career advancement", "Continuing to grow and progress in your professional life."),
    ("growth_business_ownership", "Business ownership", "Owning or building a business of your own."),
    ("growth_skill_development", "Skill development", "Continuously learning new skills and capabilities."),
    ("growth_education_training", "Education and training", "Pursuing formal education or professional development."),
    ("growth_personal_development", "Personal development", "Investing in becoming a better version of yourself."),
    ("growth_new_ventures", "Trying new ventures", "Having resources to pursue new opportunities and ideas."),
    ("growth_building_wealth", "Building wealth", "Growing your net worth and financial resources over time."),
    ("growth_expanding_opportunities", "Expanding opportunities", "Creating more options and possibilities for yourself."),
    ("growth_reinvention", "Reinvention later in life", "Having the ability to reinvent yourself in later years."),
    ("growth_lifelong_learning", "Lifelong learning", "Continuing to learn and grow throughout your entire life."),
    ("contribution_charitable_giving", "Charitable giving", "Supporting causes and organizations you care about."),
    ("contribution_local_community", "Supporting local community", "Investing time or resources in your local community."),
    ("contribution_faith_based_giving", "Faith-based giving", "Supporting your faith community through financial contributions."),
    ("contribution_volunteering", "Volunteering", "Having time and resources to volunteer for causes you believe in."),
    ("contribution_funding_causes", "Funding causes they care about", "Financially supporting causes and movements that matter to you."),
    ("contribution_helping_family", "Helping family financially", "Being able to help extended family members when needed."),
    ("contribution_mentoring", "Mentoring others", "Investing time in helping others grow and develop."),
    ("contribution_disaster_support", "Disaster or crisis support", "Being able to help during emergencies and crises."),
    ("contribution_community_leadership", "Community leadership", "Taking leadership roles in community organizations."),
    ("purpose_meaningful_work", "Meaningful work", "Having work that provides purpose and fulfillment."),
    ("purpose_legacy_building", "Legacy building", "Creating something that outlasts you and impacts others."),
    ("purpose_positive_impact", "Leaving a positive impact", "Making the world better through your actions and resources."),
    ("purpose_teaching_values", "Teaching values to children", "Passing on important values and lessons to the next generation."),
    ("purpose_living_beliefs", "Living according to beliefs", "Aligning your financial life with your core beliefs and values."),
    ("purpose_stewardship", "Stewardship of resources", "Managing resources responsibly as a caretaker, not just an owner."),
    ("purpose_faith_driven", "Faith-driven decisions", "Making financial decisions guided by faith and spiritual principles."),
    ("purpose_role_model", "Being a good role model", "Setting an example for others through your actions and choices."),
    ("purpose_mission_vision", "Long-term mission or vision", "Working toward a larger purpose or life mission."),
    ("control_budgeting_confidence", "Budgeting confidence", "Feeling confident in your ability to manage a budget."),
    ("control_clear_plan", "Clear financial plan", "Having a documented, clear plan for your financial future."),
    ("control_understanding_investments", "Understanding investments", "Knowing and understanding where your money is invested."),
    ("control_knowing_money_goes", "Knowing where money goes", "Having visibility into your spending and cash flow."),
    ("control_tax_management", "Managing tax exposure", "Being proactive about tax planning and optimization."),
    ("control_avoiding_surprises", "Avoiding surprises", "Minimizing unexpected financial events and outcomes."),
    ("control_organized_finances", "Organized finances", "Having all financial accounts and documents well-organized."),
    ("control_decision_confidence", "Decision-making confidence", "Feeling confident when making financial decisions."),
    ("control_adapting_plans", "Ability to adapt plans", "Having plans that can flex when circumstances change."),
    ("control_contingency_planning", "Planning for contingencies", "Having backup plans for various scenarios."),
    ("health_access_healthcare", "Access to healthcare", "Having reliable access to quality medical care."),
    ("health_expense_protection", "Medical expense protection", "Being protected against major medical costs."),
    ("health_preventive_care", "Preventive care", "Having resources for wellness and prevention, not just treatment."),
    ("health_mental_wellbeing", "Mental well-being", "Supporting mental health and emotional wellness."),
    ("health_stress_reduction", "Stress reduction", "Structuring finances to reduce stress and anxiety."),
    ("health_lifestyle_support", "Healthy lifestyle support", "Having resources to support a healthy lifestyle (gym, nutrition, etc.)."),
    ("health_rest_recovery", "Ability to rest and recover", "Having time and resources to rest when needed."),
    ("health_major_illness_coverage", "Coverage for major illness", "Being financially protected if a serious illness occurs."),
    ("health_long_term_wellness", "Long-term wellness planning", "Planning for health and wellness throughout life."),
    ("qol_comfortable_lifestyle", "Comfortable lifestyle", "Living comfortably without constant financial worry."),
    ("qol_hobbies", "Enjoyment of hobbies", "Having resources for hobbies and personal interests."),
    ("qol_travel_experiences", "Travel experiences", "Having meaningful travel experiences throughout life."),
    ("qol_time_with_loved_ones", "Time with loved ones", "Having time to spend with people who matter most."),
    ("qol_work_life_balance", "Work-life balance", "Maintaining balance between work and personal life."),
    ("qol_comfortable_housing", "Comfortable housing", "Living in a comfortable, pleasant home environment."),
    ("qol_dining_entertainment", "Dining and entertainment", "Enjoying restaurants, shows, and entertainment experiences."),
    ("qol_leisure_activities", "Leisure activities", "Having time and resources for relaxation and leisure."),
    ("qol_peaceful_retirement", "Peaceful retirement", "Having a calm, low-stress retirement experience."),
    ("qol_daily_enjoyment", "Daily enjoyment", "Finding joy and satisfaction in everyday life."),
)


def _build_catalog() -> MappingProxyType:
    cards = {}
    for card_id, title, description in _CARD_ROWS:
        prefix = card_id.split("_", 1)[0]
        cards[card_id] = ValueCard(card_id, title, description, _PREFIX_CATEGORY[prefix])
    return MappingProxyType(cards)


VALUE_CARDS: MappingProxyType = _build_catalog()


def get_card(card_id: str) -> ValueCard | None:
    """Look up a card by id. Unknown ids return None."""
    return VALUE_CARDS.get(card_id)


def get_card_category(card_id: str) -> ValueCategory | None:
    card = VALUE_CARDS.get(card_id)
    return card.category if card else None


def get_cards_by_category(category: ValueCategory) -> list[ValueCard]:
    """All cards of one category, in catalog order."""
    return [card for card in VALUE_CARDS.values() if card.category is category]
