from jira_ai_triage.core.value_objects.knowledge_article import KnowledgeArticle

CONFLUENCE_SPACE_URL = (
    "https://sesha3-cxone-prod.atlassian.net/wiki/spaces/~7120200716321e790240d4b41e5f881fde3e4d/pages"
)

PASSWORD_RESET_GUIDE = KnowledgeArticle(
    title="Password Reset Failure Guide",
    url=f"{CONFLUENCE_SPACE_URL}/851969/Password+Reset+Failure+Guide",
)
SESSION_EXPIRED_TROUBLESHOOTING = KnowledgeArticle(
    title="Session Expired Troubleshooting",
    url=f"{CONFLUENCE_SPACE_URL}/917505/Session+Expired+Troubleshooting",
)
ACCOUNT_LOCKED_RESOLUTION = KnowledgeArticle(
    title="Account Locked Resolution Steps",
    url=f"{CONFLUENCE_SPACE_URL}/917512/Account+Locked+Resolution+Steps",
)
SSO_LOGIN_TROUBLESHOOTING = KnowledgeArticle(
    title="SSO Login Troubleshooting",
    url=f"{CONFLUENCE_SPACE_URL}/983041/SSO+Login+Troubleshooting",
)
MFA_ISSUES = KnowledgeArticle(
    title="Multi-Factor Authentication Issues",
    url=f"{CONFLUENCE_SPACE_URL}/1081345/Multi-Factor+Authentication+Issues",
)
