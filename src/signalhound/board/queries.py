"""GraphQL query and mutation constants for the project board."""

FETCH_PROJECT_FIELDS = """
query FetchProjectFields($projectId: ID!) {
  node(id: $projectId) {
    __typename
    ... on ProjectV2 {
      fields(first: 50) {
        nodes {
          __typename
          ... on ProjectV2SingleSelectField { id name options { id name } }
          ... on ProjectV2IterationField { id name }
        }
      }
    }
  }
}
"""

FETCH_PROJECT_ITEMS = """
query FetchProjectItems($projectId: ID!, $first: Int!, $after: String) {
  node(id: $projectId) {
    __typename
    ... on ProjectV2 {
      items(first: $first, after: $after) {
        nodes {
          content {
            __typename
            ... on Issue { number title body state url }
          }
          fieldValues(first: 20) {
            nodes {
              __typename
              ... on ProjectV2ItemFieldSingleSelectValue {
                field { ... on ProjectV2FieldCommon { id name } }
                name
              }
            }
          }
        }
        pageInfo { hasNextPage endCursor }
      }
    }
  }
}
"""

ADD_DRAFT_ITEM = """
mutation AddDraftItem($projectId: ID!, $title: String!, $body: String) {
  addProjectV2DraftIssue(input: {projectId: $projectId, title: $title, body: $body}) {
    projectItem { id }
  }
}
"""

UPDATE_ITEM_FIELD = """
mutation UpdateItemField($projectId: ID!, $itemId: ID!, $fieldId: ID!, $optionId: String!) {
  updateProjectV2ItemFieldValue(input: {
    projectId: $projectId,
    itemId: $itemId,
    fieldId: $fieldId,
    value: { singleSelectOptionId: $optionId }
  }) {
    projectV2Item { id }
  }
}
"""
