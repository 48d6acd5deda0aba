REPOSITORY_CORE = """
fragment RepositoryCore on Repository {
    databaseId
    name
    nameWithOwner
    description
    url
    codeOfConduct {
        url
    }
    primaryLanguage {
        name
    }
    forks {
        totalCount
    }
    stargazers {
        totalCount
    }
    watchers {
        totalCount
    }
}
"""
