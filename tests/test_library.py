from xmlprompter.library.roles import (
    ROLES,
    USER_GOALS,
    get_categories,
    get_goal_by_id,
    get_role_by_id,
    get_role_objects_for_goal,
    get_roles_by_category,
    get_roles_for_goal,
)
from xmlprompter.library.templates import (
    TEMPLATE_CATEGORIES,
    TEMPLATES,
    filter_templates,
    get_popular_tags,
    get_template_by_id,
    get_templates_by_category,
    get_templates_by_tag,
    get_templates_by_tier,
    search_templates,
)


def test_role_catalogue():
    assert len(ROLES) == 55
    assert len({role.id for role in ROLES}) == 55
    assert get_role_by_id("software_developer").name == "Software Developer"
    assert get_role_by_id("missing") is None


def test_roles_grouped_by_category():
    grouped = get_roles_by_category()

    assert list(grouped) == get_categories()
    assert sum(len(roles) for roles in grouped.values()) == len(ROLES)


def test_goal_roles():
    assert len(USER_GOALS) == 12
    assert get_goal_by_id("build_software").title == "Build Software"
    assert get_roles_for_goal("build_software")[0] == "software_developer"
    assert get_roles_for_goal("unknown") == []


def test_goal_role_objects_skip_unknown_ids():
    for goal in USER_GOALS:
        objects = get_role_objects_for_goal(goal.id)
        assert all(get_role_by_id(role.id) is role for role in objects)
        assert len(objects) <= len(goal.relevant_roles)


def test_template_catalogue():
    assert len(TEMPLATES) == 10
    assert TEMPLATE_CATEGORIES[0].id == "all"
    assert get_template_by_id("marketing-email-generator").tier == "free"
    assert get_template_by_id("nope") is None


def test_templates_by_category():
    assert get_templates_by_category("all") == list(TEMPLATES)
    assert [t.id for t in get_templates_by_category("business")] == [
        "business-plan-generator",
        "project-proposal-writer",
    ]


def test_templates_by_tag_is_case_insensitive_substring():
    ids = [t.id for t in get_templates_by_tag("EMAIL")]

    assert ids == ["marketing-email-generator", "onboarding-email-sequence"]


def test_search_matches_author():
    assert [t.id for t in search_templates("support team")] == ["customer-support-response"]


def test_templates_by_tier():
    assert {t.tier for t in get_templates_by_tier("pro")} == {"pro"}
    assert len(get_templates_by_tier("pro")) + len(get_templates_by_tier("free")) == len(TEMPLATES)


def test_popular_tags():
    tags = get_popular_tags(limit=3)

    assert len(tags) == 3
    assert tags[0] == {"tag": "B2B", "count": 6}
    assert tags[0]["count"] >= tags[1]["count"] >= tags[2]["count"]


def test_filter_templates_combines_filters():
    assert filter_templates() == list(TEMPLATES)
    assert [t.id for t in filter_templates(category="marketing", tier="pro")] == [
        "onboarding-email-sequence"
    ]


def test_template_to_dict_uses_wire_names():
    data = get_template_by_id("marketing-email-generator").to_dict()

    assert data["lastUpdated"]
    assert isinstance(data["tags"], list)
    assert set(data["template"]) == {"role", "task", "context", "requirements", "style", "output"}
