"""GraphQL query templates for GitHub API."""

# Sponsorships per request
DEFAULT_PAGE_SIZE = 50

# Sponsorships received by the authenticated viewer, private ones included
SPONSORSHIPS_QUERY = """
query Sponsors($first: Int!, $after: String) {
  viewer {
    sponsorshipsAsMaintainer(includePrivate: true, first: $first, after: $after) {
      pageInfo {
        hasNextPage
        endCursor
      }
      edges {
        cursor
        node {
          id
          createdAt
          privacyLevel
          tier {
            id
            name
            createdAt
            description
            monthlyPriceInCents
          }
          sponsorEntity {
            __typename
            ... on User {
              login
              userEmail: email
            }
            ... on Organization {
              login
              orgEmail: email
            }
          }
        }
      }
    }
  }
}
"""
