ISSUE_CORE = """
fragment IssueCore on Issue {
    databaseId
    number
    title
    url
    bodyText
    participants {
        totalCount
    }
    timeline {
        totalCount
    }
    repository {
        ...RepositoryCore
    }
}
"""
