"""GraphQL documents used by the gh CLI client."""

REPOSITORY_INFO = """
query RepositoryInfo($owner: String!, $name: String!) {
  repository(owner: $owner, name: $name) {
    id
    owner { id }
  }
}
"""

LIST_LABELS = """
query ListLabels($owner: String!, $name: String!, $cursor: String) {
  repository(owner: $owner, name: $name) {
    labels(first: 100, after: $cursor) {
      nodes { id name }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""

GET_LABEL_ID = """
query GetLabelId($owner: String!, $name: String!, $labelName: String!) {
  repository(owner: $owner, name: $name) {
    label(name: $labelName) { id }
  }
}
"""

GET_USER_ID = """
query GetUserId($login: String!) {
  user(login: $login) { id }
}
"""

LIST_DISCUSSION_CATEGORIES = """
query ListDiscussionCategories($owner: String!, $name: String!) {
  repository(owner: $owner, name: $name) {
    discussionCategories(first: 100) {
      nodes { id name }
    }
  }
}
"""

LIST_ISSUES = """
query ListIssues($owner: String!, $name: String!, $cursor: String) {
  repository(owner: $owner, name: $name) {
    issues(first: 100, after: $cursor, states: OPEN) {
      nodes {
        id
        number
        title
        body
        labels(first: 100) { nodes { name } }
        assignees(first: 100) { nodes { login } }
      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""

LIST_DISCUSSIONS = """
query ListDiscussions($owner: String!, $name: String!, $cursor: String) {
  repository(owner: $owner, name: $name) {
    discussions(first: 100, after: $cursor) {
      nodes {
        id
        number
        title
        body
        category { name }
        labels(first: 100) { nodes { name } }
      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""

LIST_PULL_REQUESTS = """
query ListPullRequests($owner: String!, $name: String!, $cursor: String) {
  repository(owner: $owner, name: $name) {
    pullRequests(first: 100, after: $cursor, states: OPEN) {
      nodes {
        id
        number
        title
        body
        headRefName
        baseRefName
        isDraft
        labels(first: 100) { nodes { name } }
        assignees(first: 100) { nodes { login } }
      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""

CREATE_LABEL = """
mutation CreateLabel($repositoryId: ID!, $name: String!, $color: String!, $description: String) {
  createLabel(input: {
    repositoryId: $repositoryId, name: $name, color: $color, description: $description
  }) {
    label { id name }
  }
}
"""

DELETE_LABEL = """
mutation DeleteLabel($id: ID!) {
  deleteLabel(input: {id: $id}) { clientMutationId }
}
"""

CREATE_ISSUE = """
mutation CreateIssue(
  $repositoryId: ID!, $title: String!, $body: String, $labelIds: [ID!], $assigneeIds: [ID!]
) {
  createIssue(input: {
    repositoryId: $repositoryId, title: $title, body: $body,
    labelIds: $labelIds, assigneeIds: $assigneeIds
  }) {
    issue { id number title url }
  }
}
"""

CREATE_DISCUSSION = """
mutation CreateDiscussion(
  $repositoryId: ID!, $categoryId: ID!, $title: String!, $body: String!
) {
  createDiscussion(input: {
    repositoryId: $repositoryId, categoryId: $categoryId, title: $title, body: $body
  }) {
    discussion { id number title url }
  }
}
"""

CREATE_PULL_REQUEST = """
mutation CreatePullRequest(
  $repositoryId: ID!, $title: String!, $body: String,
  $headRefName: String!, $baseRefName: String!, $draft: Boolean
) {
  createPullRequest(input: {
    repositoryId: $repositoryId, title: $title, body: $body,
    headRefName: $headRefName, baseRefName: $baseRefName, draft: $draft
  }) {
    pullRequest { id number title url }
  }
}
"""

ADD_LABELS = """
mutation AddLabels($labelableId: ID!, $labelIds: [ID!]!) {
  addLabelsToLabelable(input: {labelableId: $labelableId, labelIds: $labelIds}) {
    clientMutationId
  }
}
"""

ADD_ASSIGNEES = """
mutation AddAssignees($assignableId: ID!, $assigneeIds: [ID!]!) {
  addAssigneesToAssignable(input: {assignableId: $assignableId, assigneeIds: $assigneeIds}) {
    clientMutationId
  }
}
"""

CLOSE_ISSUE = """
mutation CloseIssue($id: ID!) {
  closeIssue(input: {issueId: $id}) { issue { id } }
}
"""

CLOSE_PULL_REQUEST = """
mutation ClosePullRequest($id: ID!) {
  closePullRequest(input: {pullRequestId: $id}) { pullRequest { id } }
}
"""

DELETE_DISCUSSION = """
mutation DeleteDiscussion($id: ID!) {
  deleteDiscussion(input: {id: $id}) { discussion { id } }
}
"""

CREATE_PROJECT_V2 = """
mutation CreateProjectV2($ownerId: ID!, $repositoryId: ID, $title: String!) {
  createProjectV2(input: {ownerId: $ownerId, repositoryId: $repositoryId, title: $title}) {
    projectV2 { id number title url }
  }
}
"""

UPDATE_PROJECT_V2_DESCRIPTION = """
mutation UpdateProjectV2($projectId: ID!, $shortDescription: String!) {
  updateProjectV2(input: {projectId: $projectId, shortDescription: $shortDescription}) {
    projectV2 { id }
  }
}
"""

ADD_PROJECT_V2_ITEM = """
mutation AddProjectV2Item($projectId: ID!, $contentId: ID!) {
  addProjectV2ItemById(input: {projectId: $projectId, contentId: $contentId}) {
    item { id }
  }
}
"""

GET_PROJECT_V2 = """
query GetProjectV2($id: ID!) {
  node(id: $id) {
    ... on ProjectV2 { id number title url }
  }
}
"""
