"""Static prompt template library.

Each template pre-fills the prompt form for a common use case. Templates are
immutable and carry catalogue metadata (category, tags, tier, popularity).

Query behavior:
    - Category `all` returns every template.
    - Tag and free-text matching are case-insensitive substring matches.
    - Result order always follows catalogue order.
"""

from dataclasses import dataclass

from xmlprompter.prompting.prompt_types import FormData


@dataclass(frozen=True)
class TemplateCategory:
    id: str
    name: str
    description: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class Template:
    id: str
    title: str
    description: str
    category: str
    tags: tuple
    usage: int
    rating: float
    tier: str
    author: str
    last_updated: str
    preview: str
    template: FormData

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "tags": list(self.tags),
            "usage": self.usage,
            "rating": self.rating,
            "tier": self.tier,
            "author": self.author,
            "lastUpdated": self.last_updated,
            "preview": self.preview,
            "template": self.template.to_dict(),
        }


TEMPLATE_CATEGORIES = (
    TemplateCategory("all", "All Templates", "Browse all available templates"),
    TemplateCategory("marketing", "Marketing & Sales", "Email campaigns, social media, advertising"),
    TemplateCategory("development", "Development", "Code documentation, API specs, technical writing"),
    TemplateCategory("content", "Content Creation", "Blog posts, articles, newsletters, copywriting"),
    TemplateCategory("analytics", "Analytics & Research", "Data analysis, market research, insights"),
    TemplateCategory("support", "Customer Support", "Customer service, help documentation"),
    TemplateCategory("business", "Business & Strategy", "Business plans, strategy, planning"),
    TemplateCategory("education", "Education", "Lesson plans, training materials, academic"),
    TemplateCategory("creative", "Creative", "Creative writing, storytelling, design"),
)


# =========================================================
# TEMPLATES
# =========================================================

TEMPLATES = (
    Template(
        id="marketing-email-generator",
        title="Marketing Email Generator",
        description="Create compelling marketing emails for product launches and campaigns with proven conversion strategies",
        category="marketing",
        tags=("email-marketing", "product-launch", "conversion", "B2B", "B2C", "SaaS", "e-commerce"),
        usage=1247,
        rating=4.8,
        tier="free",
        author="PromptCraft Team",
        last_updated="2024-01-15",
        preview="Generate a marketing email for {product} targeting {audience} with {goal}...",
        template=FormData(
            role="Marketing Manager",
            task="Create a compelling marketing email for {product} that targets {audience} and drives {goal}",
            context="Product: {product}\nAudience: {audience}\nGoal: {goal}\nBrand Voice: {tone}",
            requirements="Include compelling subject line, clear value proposition, strong call-to-action, and mobile-optimized design",
            style="Professional and engaging",
            output="HTML email template with subject line",
        ),
    ),
    Template(
        id="code-documentation-assistant",
        title="Code Documentation Assistant",
        description="Generate comprehensive documentation for code functions and APIs with best practices",
        category="development",
        tags=("documentation", "api", "javascript", "python", "react", "nodejs", "developers"),
        usage=892,
        rating=4.9,
        tier="pro",
        author="Dev Team",
        last_updated="2024-01-10",
        preview="Document this {language} function with parameters, return values, and examples...",
        template=FormData(
            role="Software Developer",
            task="Create comprehensive documentation for {function_name} in {language}",
            context="Function: {function_name}\nLanguage: {language}\nFramework: {framework}\nPurpose: {purpose}",
            requirements="Include function signature, parameters, return values, examples, error handling, and usage notes",
            style="Technical and precise",
            output="JSDoc/TSDoc format with examples",
        ),
    ),
    Template(
        id="content-strategy-planner",
        title="Content Strategy Planner",
        description="Plan content strategy for social media campaigns and content marketing with data-driven insights",
        category="content",
        tags=("content-marketing", "social-media", "strategy", "planning", "marketers", "B2B", "B2C"),
        usage=567,
        rating=4.7,
        tier="free",
        author="Content Team",
        last_updated="2024-01-12",
        preview="Create a {duration} content calendar for {platform} focusing on {theme}...",
        template=FormData(
            role="Content Strategist",
            task="Develop a {duration} content strategy for {platform} focusing on {theme}",
            context="Platform: {platform}\nDuration: {duration}\nTheme: {theme}\nTarget Audience: {audience}",
            requirements="Include content themes, posting schedule, content types, engagement goals, and performance metrics",
            style="Strategic and data-driven",
            output="Structured content calendar with themes and schedule",
        ),
    ),
    Template(
        id="data-analysis-framework",
        title="Data Analysis Framework",
        description="Comprehensive data analysis and insights generation with visualization recommendations",
        category="analytics",
        tags=("data-analysis", "insights", "analytics", "research", "business-intelligence", "SMEs", "enterprise"),
        usage=445,
        rating=4.6,
        tier="pro",
        author="Analytics Team",
        last_updated="2024-01-08",
        preview="Analyze this dataset and provide insights on {metrics} with {visualization}...",
        template=FormData(
            role="Data Analyst",
            task="Analyze {dataset} and provide insights on {metrics}",
            context="Dataset: {dataset}\nMetrics: {metrics}\nBusiness Context: {context}\nStakeholders: {stakeholders}",
            requirements="Include statistical analysis, key insights, visualization recommendations, actionable recommendations, and limitations",
            style="Analytical and objective",
            output="Comprehensive analysis report with insights and recommendations",
        ),
    ),
    Template(
        id="customer-support-response",
        title="Customer Support Response",
        description="Professional customer support response templates for various scenarios",
        category="support",
        tags=("customer-support", "customer-service", "communication", "B2B", "B2C", "SaaS", "e-commerce"),
        usage=334,
        rating=4.5,
        tier="free",
        author="Support Team",
        last_updated="2024-01-14",
        preview="Draft a professional response to customer {issue} with {tone} and {solution}...",
        template=FormData(
            role="Customer Support Representative",
            task="Draft a professional response to customer {issue}",
            context="Issue: {issue}\nCustomer Type: {customer_type}\nPriority: {priority}\nPrevious Interactions: {history}",
            requirements="Show empathy, provide clear solution, set expectations, offer additional help, maintain brand voice",
            style="Professional and empathetic",
            output="Professional email response with next steps",
        ),
    ),
    Template(
        id="business-plan-generator",
        title="Business Plan Generator",
        description="Create comprehensive business plans and strategies for startups and SMEs",
        category="business",
        tags=("business-plan", "strategy", "startups", "SMEs", "planning", "investors", "executives"),
        usage=223,
        rating=4.4,
        tier="pro",
        author="Business Team",
        last_updated="2024-01-06",
        preview="Develop a business plan for {industry} startup with {funding} and {timeline}...",
        template=FormData(
            role="Business Consultant",
            task="Develop a comprehensive business plan for {business_type} in {industry}",
            context="Business Type: {business_type}\nIndustry: {industry}\nFunding Required: {funding}\nTimeline: {timeline}",
            requirements="Include executive summary, market analysis, competitive analysis, financial projections, marketing strategy, and risk assessment",
            style="Professional and comprehensive",
            output="Structured business plan document",
        ),
    ),
    Template(
        id="social-media-post-creator",
        title="Social Media Post Creator",
        description="Create engaging social media posts for various platforms and audiences",
        category="marketing",
        tags=("social-media", "content-creation", "engagement", "B2B", "B2C", "branding", "influencer-marketing"),
        usage=189,
        rating=4.3,
        tier="free",
        author="Social Media Team",
        last_updated="2024-01-16",
        preview="Create a {platform} post about {topic} with {tone} and {call-to-action}...",
        template=FormData(
            role="Social Media Manager",
            task="Create an engaging {platform} post about {topic}",
            context="Platform: {platform}\nTopic: {topic}\nTarget Audience: {audience}\nBrand Voice: {tone}",
            requirements="Include compelling hook, relevant hashtags, engaging visuals, clear call-to-action, and platform optimization",
            style="Engaging and platform-optimized",
            output="Social media post with hashtags and visual recommendations",
        ),
    ),
    Template(
        id="project-proposal-writer",
        title="Project Proposal Writer",
        description="Write compelling project proposals for clients and stakeholders",
        category="business",
        tags=("proposal", "project-management", "B2B", "clients", "stakeholders", "enterprise", "SMEs"),
        usage=156,
        rating=4.2,
        tier="pro",
        author="Business Development Team",
        last_updated="2024-01-09",
        preview="Write a project proposal for {project} with {budget} and {timeline}...",
        template=FormData(
            role="Business Development Manager",
            task="Write a compelling project proposal for {project_type}",
            context="Project Type: {project_type}\nClient: {client}\nBudget: {budget}\nTimeline: {timeline}",
            requirements="Include problem statement, solution overview, methodology, timeline, budget breakdown, and success metrics",
            style="Professional and persuasive",
            output="Structured project proposal document",
        ),
    ),
    Template(
        id="onboarding-email-sequence",
        title="Onboarding Email Sequence",
        description="Create effective onboarding email sequences for new customers",
        category="marketing",
        tags=("onboarding", "email-marketing", "customer-success", "SaaS", "B2B", "B2C", "conversion"),
        usage=145,
        rating=4.1,
        tier="pro",
        author="Customer Success Team",
        last_updated="2024-01-11",
        preview="Create an onboarding email sequence for {product} with {steps}...",
        template=FormData(
            role="Customer Success Manager",
            task="Create an onboarding email sequence for {product}",
            context="Product: {product}\nUser Type: {user_type}\nOnboarding Steps: {steps}\nSuccess Metrics: {metrics}",
            requirements="Include welcome email, feature introductions, best practices, support resources, and success milestones",
            style="Welcoming and helpful",
            output="Email sequence with timing and content for each email",
        ),
    ),
    Template(
        id="technical-writer-assistant",
        title="Technical Writer Assistant",
        description="Generate technical documentation and user guides",
        category="development",
        tags=("technical-writing", "documentation", "user-guides", "developers", "end-users", "SaaS", "enterprise"),
        usage=134,
        rating=4.0,
        tier="free",
        author="Technical Writing Team",
        last_updated="2024-01-13",
        preview="Write a technical guide for {feature} with {audience} in mind...",
        template=FormData(
            role="Technical Writer",
            task="Write a technical guide for {feature}",
            context="Feature: {feature}\nTarget Audience: {audience}\nComplexity Level: {complexity}\nPlatform: {platform}",
            requirements="Include overview, prerequisites, step-by-step instructions, examples, troubleshooting, and related resources",
            style="Clear and technical",
            output="Structured technical guide with examples",
        ),
    ),
)


# =========================================================
# QUERIES
# =========================================================

def get_template_by_id(template_id):
    for template in TEMPLATES:
        if template.id == template_id:
            return template
    return None


def get_templates_by_category(category: str) -> list[Template]:
    if category == "all":
        return list(TEMPLATES)
    return [template for template in TEMPLATES if template.category == category]


def get_templates_by_tag(tag: str) -> list[Template]:
    needle = tag.lower()
    return [
        template for template in TEMPLATES
        if any(needle in template_tag.lower() for template_tag in template.tags)
    ]


def get_templates_by_tier(tier: str) -> list[Template]:
    return [template for template in TEMPLATES if template.tier == tier]


def search_templates(search_term: str) -> list[Template]:
    """Match title, description, tags or author against `search_term`."""
    term = search_term.lower()
    return [
        template for template in TEMPLATES
        if term in template.title.lower()
        or term in template.description.lower()
        or any(term in tag.lower() for tag in template.tags)
        or term in template.author.lower()
    ]


def get_popular_tags(limit: int = 20) -> list[dict]:
    """Return `{"tag", "count"}` entries, most used first.

    Ties keep first-seen order.
    """
    counts: dict[str, int] = {}
    for template in TEMPLATES:
        for tag in template.tags:
            counts[tag] = counts.get(tag, 0) + 1

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [{"tag": tag, "count": count} for tag, count in ranked[:limit]]


def filter_templates(category=None, tag=None, query=None, tier=None) -> list[Template]:
    """Apply every given filter; `None` or blank filters are skipped."""
    selected = list(TEMPLATES)
    if category:
        allowed = {template.id for template in get_templates_by_category(category)}
        selected = [template for template in selected if template.id in allowed]
    if tag:
        allowed = {template.id for template in get_templates_by_tag(tag)}
        selected = [template for template in selected if template.id in allowed]
    if query:
        allowed = {template.id for template in search_templates(query)}
        selected = [template for template in selected if template.id in allowed]
    if tier:
        selected = [template for template in selected if template.tier == tier]
    return selected
