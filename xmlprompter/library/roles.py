"""Static role and user-goal catalogue.

Roles seed the form's `role` field; user goals group roles by what the user
is trying to achieve. Both tables are immutable module constants loaded once
at import.

Lookup behavior:
    Goal lookups return `None` / empty tuples for unknown ids. Goal role lists
    may reference role ids with no catalogue entry; `get_roles_for_goal`
    returns the ids as declared, `get_role_objects_for_goal` skips unknown ids.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class Role:
    id: str
    name: str
    category: str
    description: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class UserGoal:
    id: str
    title: str
    description: str
    relevant_roles: tuple = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "relevantRoles": list(self.relevant_roles),
        }


# =========================================================
# ROLES
# =========================================================

ROLES = (
    Role("software_developer", "Software Developer", "Technology",
         "Expert in programming, software architecture, and technical problem-solving"),
    Role("data_scientist", "Data Scientist", "Technology",
         "Specialist in data analysis, machine learning, and statistical modeling"),
    Role("devops_engineer", "DevOps Engineer", "Technology",
         "Expert in automation, infrastructure, and deployment pipelines"),
    Role("cybersecurity_analyst", "Cybersecurity Analyst", "Technology",
         "Specialist in security protocols, threat analysis, and risk assessment"),
    Role("ai_researcher", "AI Researcher", "Technology",
         "Expert in artificial intelligence, machine learning research, and innovation"),
    Role("systems_architect", "Systems Architect", "Technology",
         "Designer of complex technical systems and infrastructure solutions"),
    Role("mobile_developer", "Mobile Developer", "Technology",
         "Specialist in iOS, Android, and cross-platform mobile applications"),
    Role("ux_ui_designer", "UX/UI Designer", "Creative",
         "Creative professional focused on user experience and interface design"),
    Role("content_writer", "Content Writer", "Creative",
         "Professional writer specializing in various content formats and styles"),
    Role("graphic_designer", "Graphic Designer", "Creative",
         "Visual designer creating graphics, layouts, and brand materials"),
    Role("video_producer", "Video Producer", "Creative",
         "Creator of video content, from concept to final production"),
    Role("copywriter", "Copywriter", "Creative",
         "Specialist in persuasive writing for marketing and advertising"),
    Role("brand_strategist", "Brand Strategist", "Creative",
         "Expert in brand positioning, identity development, and messaging"),
    Role("social_media_manager", "Social Media Manager", "Creative",
         "Specialist in social platform strategy and community engagement"),
    Role("business_consultant", "Business Consultant", "Business",
         "Strategic advisor with expertise in business operations and growth"),
    Role("product_manager", "Product Manager", "Business",
         "Leader in product strategy, development, and market positioning"),
    Role("project_manager", "Project Manager", "Business",
         "Experienced in project planning, execution, and team coordination"),
    Role("startup_advisor", "Startup Advisor", "Business",
         "Mentor for early-stage companies and entrepreneurial ventures"),
    Role("business_analyst", "Business Analyst", "Business",
         "Expert in process analysis, requirements gathering, and optimization"),
    Role("operations_manager", "Operations Manager", "Business",
         "Specialist in operational efficiency and process improvement"),
    Role("strategy_consultant", "Strategy Consultant", "Business",
         "Expert in corporate strategy, market analysis, and competitive positioning"),
    Role("marketing_specialist", "Marketing Specialist", "Marketing",
         "Skilled in digital marketing, content strategy, and brand communication"),
    Role("seo_specialist", "SEO Specialist", "Marketing",
         "Expert in search engine optimization and digital visibility"),
    Role("sales_manager", "Sales Manager", "Marketing",
         "Leader in sales strategy, team management, and revenue growth"),
    Role("growth_hacker", "Growth Hacker", "Marketing",
         "Specialist in rapid growth strategies and data-driven marketing"),
    Role("email_marketer", "Email Marketer", "Marketing",
         "Expert in email campaigns, automation, and customer retention"),
    Role("financial_analyst", "Financial Analyst", "Finance",
         "Expert in financial modeling, investment analysis, and market research"),
    Role("accountant", "Accountant", "Finance",
         "Professional in financial record-keeping, compliance, and reporting"),
    Role("investment_advisor", "Investment Advisor", "Finance",
         "Specialist in portfolio management and investment strategies"),
    Role("legal_counsel", "Legal Counsel", "Legal",
         "Attorney specializing in corporate law and legal compliance"),
    Role("contract_lawyer", "Contract Lawyer", "Legal",
         "Expert in contract drafting, negotiation, and legal documentation"),
    Role("compliance_officer", "Compliance Officer", "Legal",
         "Specialist in regulatory compliance and risk management"),
    Role("medical_researcher", "Medical Researcher", "Healthcare",
         "Scientist conducting medical research and clinical studies"),
    Role("healthcare_administrator", "Healthcare Administrator", "Healthcare",
         "Manager of healthcare operations and patient care systems"),
    Role("clinical_data_analyst", "Clinical Data Analyst", "Healthcare",
         "Specialist in medical data analysis and clinical research"),
    Role("pharmaceutical_researcher", "Pharmaceutical Researcher", "Healthcare",
         "Expert in drug development and pharmaceutical sciences"),
    Role("educator", "Educator", "Education",
         "Skilled in teaching, curriculum development, and educational methodology"),
    Role("instructional_designer", "Instructional Designer", "Education",
         "Expert in learning experience design and educational technology"),
    Role("corporate_trainer", "Corporate Trainer", "Education",
         "Specialist in professional development and skills training"),
    Role("curriculum_developer", "Curriculum Developer", "Education",
         "Designer of educational programs and learning pathways"),
    Role("research_specialist", "Research Specialist", "Research",
         "Expert in research methodology, analysis, and academic writing"),
    Role("market_researcher", "Market Researcher", "Research",
         "Specialist in consumer behavior and market trend analysis"),
    Role("policy_analyst", "Policy Analyst", "Research",
         "Expert in policy research, evaluation, and public administration"),
    Role("scientific_researcher", "Scientific Researcher", "Research",
         "Scientist conducting research in various scientific disciplines"),
    Role("hr_manager", "HR Manager", "Operations",
         "Leader in human resources, talent management, and organizational development"),
    Role("recruiter", "Recruiter", "Operations",
         "Specialist in talent acquisition and candidate assessment"),
    Role("supply_chain_manager", "Supply Chain Manager", "Operations",
         "Expert in logistics, procurement, and supply chain optimization"),
    Role("quality_assurance", "Quality Assurance", "Operations",
         "Specialist in quality control, testing, and process improvement"),
    Role("customer_success_manager", "Customer Success Manager", "Customer",
         "Expert in customer relationship management and retention strategies"),
    Role("technical_support", "Technical Support", "Customer",
         "Specialist in technical troubleshooting and customer assistance"),
    Role("community_manager", "Community Manager", "Customer",
         "Expert in community building and engagement strategies"),
    Role("journalist", "Journalist", "Media",
         "Professional writer focused on news reporting and investigative journalism"),
    Role("technical_writer", "Technical Writer", "Technical",
         "Specialist in technical documentation and communication"),
    Role("sustainability_consultant", "Sustainability Consultant", "Consulting",
         "Expert in environmental impact and sustainable business practices"),
    Role("nonprofit_director", "Nonprofit Director", "Nonprofit",
         "Leader in nonprofit management and social impact initiatives"),
)

_ROLES_BY_ID = {role.id: role for role in ROLES}


# =========================================================
# USER GOALS
# =========================================================

USER_GOALS = (
    UserGoal(
        "write_content", "Write Content",
        "Create written content like articles, posts, or documentation",
        ("content_writer", "copywriter", "technical_writer", "journalist",
         "social_media_manager", "email_marketer", "marketing_specialist"),
    ),
    UserGoal(
        "build_software", "Build Software",
        "Develop applications, websites, or technical solutions",
        ("software_developer", "mobile_developer", "devops_engineer",
         "systems_architect", "ai_researcher"),
    ),
    UserGoal(
        "analyze_data", "Analyze Data",
        "Process, interpret, and extract insights from data",
        ("data_scientist", "business_analyst", "financial_analyst",
         "market_researcher", "research_specialist"),
    ),
    UserGoal(
        "design_visuals", "Design Visuals",
        "Create visual content, interfaces, or brand materials",
        ("ux_ui_designer", "graphic_designer", "brand_strategist", "video_producer"),
    ),
    UserGoal(
        "manage_business", "Manage Business",
        "Lead projects, teams, or strategic initiatives",
        ("business_consultant", "product_manager", "project_manager",
         "operations_manager", "strategy_consultant", "startup_advisor"),
    ),
    UserGoal(
        "market_promote", "Market & Promote",
        "Promote products, services, or build brand awareness",
        ("marketing_specialist", "seo_specialist", "growth_hacker",
         "sales_manager", "email_marketer", "social_media_manager"),
    ),
    UserGoal(
        "research_learn", "Research & Learn",
        "Investigate topics, gather information, or conduct studies",
        ("research_specialist", "market_researcher", "ai_researcher",
         "educator", "academic_researcher"),
    ),
    UserGoal(
        "solve_problems", "Solve Problems",
        "Address challenges, troubleshoot issues, or optimize processes",
        ("business_consultant", "systems_architect", "cybersecurity_analyst",
         "operations_manager", "technical_support"),
    ),
    UserGoal(
        "handle_finances", "Handle Finances",
        "Manage money, investments, or financial planning",
        ("financial_analyst", "accountant", "investment_advisor", "business_consultant"),
    ),
    UserGoal(
        "legal_compliance", "Legal & Compliance",
        "Handle legal matters, contracts, or regulatory compliance",
        ("legal_counsel", "contract_lawyer", "compliance_officer"),
    ),
    UserGoal(
        "support_customers", "Support Customers",
        "Help users, provide support, or manage relationships",
        ("customer_success_manager", "technical_support", "customer_service_rep"),
    ),
    UserGoal(
        "manage_people", "Manage People",
        "Lead teams, hire talent, or develop organizational culture",
        ("hr_manager", "project_manager", "operations_manager", "business_consultant"),
    ),
)

_GOALS_BY_ID = {goal.id: goal for goal in USER_GOALS}


# =========================================================
# LOOKUPS
# =========================================================

def get_role_by_id(role_id):
    return _ROLES_BY_ID.get(role_id)


def get_categories() -> list[str]:
    """Return role categories in first-seen order."""
    categories: list[str] = []
    for role in ROLES:
        if role.category not in categories:
            categories.append(role.category)
    return categories


def get_roles_by_category() -> dict[str, list[Role]]:
    grouped: dict[str, list[Role]] = {}
    for role in ROLES:
        grouped.setdefault(role.category, []).append(role)
    return grouped


def get_goal_by_id(goal_id):
    return _GOALS_BY_ID.get(goal_id)


def get_all_goals() -> list[UserGoal]:
    return list(USER_GOALS)


def get_roles_for_goal(goal_id) -> list[str]:
    """Return the role ids declared for a goal; empty for unknown goals."""
    goal = get_goal_by_id(goal_id)
    return list(goal.relevant_roles) if goal else []


def get_role_objects_for_goal(goal_id) -> list[Role]:
    return [
        _ROLES_BY_ID[role_id]
        for role_id in get_roles_for_goal(goal_id)
        if role_id in _ROLES_BY_ID
    ]
