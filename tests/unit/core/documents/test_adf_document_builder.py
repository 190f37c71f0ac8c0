from jira_ai_triage.core.documents.adf_document_builder import AdfDocumentBuilder
from jira_ai_triage.core.value_objects.knowledge_article import KnowledgeArticle
from jira_ai_triage.core.value_objects.triage_comment import TriageComment

ARTICLE = KnowledgeArticle(title="Password Reset Failure Guide", url="https://kb.example.com/851969")


def test_build_triage_comment_is_a_doc_of_text_paragraphs():
    adf = AdfDocumentBuilder.build_triage_comment(TriageComment(analysis="Check the reset token expiry."))

    assert adf["type"] == "doc"
    assert adf["version"] == 1
    for node in adf["content"]:
        assert node["type"] == "paragraph"
        assert all(child["type"] == "text" for child in node["content"])


def test_analysis_only_comment_has_label_and_analysis():
    adf = AdfDocumentBuilder.build_triage_comment(TriageComment(analysis="Severity: Medium"))

    content = adf["content"]
    assert len(content) == 2

    label = content[0]["content"][0]
    assert label["text"] == "AI Analysis:"
    assert label["marks"] == [{"type": "strong"}]
    assert content[1]["content"][0]["text"] == "Severity: Medium"


def test_analysis_blocks_become_separate_paragraphs():
    analysis = "1. Verify the account.\n2. Resend the link.\n\n\nSeverity: Low"
    adf = AdfDocumentBuilder.build_triage_comment(TriageComment(analysis=analysis))

    texts = [node["content"][0]["text"] for node in adf["content"][1:]]
    assert texts == ["1. Verify the account.\n2. Resend the link.", "Severity: Low"]


def test_article_block_carries_title_and_linked_url():
    adf = AdfDocumentBuilder.build_triage_comment(TriageComment(analysis="Reset flow broken", article=ARTICLE))

    content = adf["content"]
    assert len(content) == 5
    assert content[2]["content"][0]["text"] == "Recommended Knowledge Article:"
    assert content[3]["content"][0]["text"] == ARTICLE.title

    link = content[4]["content"][0]
    assert link["text"] == ARTICLE.url
    assert link["marks"][0]["type"] == "link"
    assert link["marks"][0]["attrs"]["href"] == ARTICLE.url


def test_empty_blocks_are_dropped():
    adf = AdfDocumentBuilder.build_text_document("\n\n  \n\n")
    assert adf["content"] == []


def test_to_plain_text_round_trips_the_visible_text():
    comment = TriageComment(analysis="Step one", article=ARTICLE)
    adf = AdfDocumentBuilder.build_triage_comment(comment)

    assert AdfDocumentBuilder.to_plain_text(adf) == (
        "AI Analysis:\nStep one\nRecommended Knowledge Article:\n"
        f"{ARTICLE.title}\n{ARTICLE.url}"
    )
