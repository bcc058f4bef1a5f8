from clientflow.models.notification import EmailTemplateData
from clientflow.services.email_templates import TEMPLATES, render_template


def test_unknown_template():
    assert render_template("nope", EmailTemplateData()) is None


def test_every_template_renders_subject_and_html():
    data = EmailTemplateData(clientName="Acme", serviceName="SEO", weekDate="2026-03-09")
    for name in TEMPLATES:
        content = render_template(name, data)
        assert content["subject"].endswith("- Acme"), name
        assert "ClientFlow" in content["html"], name


def test_default_recipient_names():
    assert "Hello Admin," in render_template("report_submitted", EmailTemplateData())["html"]
    assert "Hello Team Member," in render_template("report_approved", EmailTemplateData())["html"]
    assert "Hello Dana," in render_template("budget_alert", EmailTemplateData(recipientName="Dana"))["html"]


def test_optional_blocks():
    plain = render_template("report_revision", EmailTemplateData())["html"]
    assert "Requested Changes" not in plain
    assert "Edit Report" not in plain

    full = render_template("report_revision", EmailTemplateData(feedback="Add KPIs", reportLink="https://x/r/1"))["html"]
    assert "Requested Changes" in full
    assert 'href="https://x/r/1"' in full


def test_values_are_escaped():
    html = render_template("report_approved", EmailTemplateData(feedback="<script>x</script>"))["html"]
    assert "<script>" not in html
    assert "&lt;script&gt;" in html
