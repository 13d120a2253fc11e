"""Centralized GraphQL query strings for the Litmus control plane.

These constants mirror the server schema and must be updated together with it.
"""

from __future__ import annotations


# ---------------------------------------------------------------------
# Environments
# ---------------------------------------------------------------------

CREATE_ENVIRONMENT_MUTATION = """
mutation createEnvironment($projectID: ID!, $request: CreateEnvironmentRequest!) {
  createEnvironment(projectID: $projectID, request: $request) {
    environmentID
    name
    description
    type
    tags
    createdAt
    updatedAt
  }
}
"""

UPDATE_ENVIRONMENT_MUTATION = """
mutation updateEnvironment($projectID: ID!, $request: UpdateEnvironmentRequest!) {
  updateEnvironment(projectID: $projectID, request: $request)
}
"""

DELETE_ENVIRONMENT_MUTATION = """
mutation deleteEnvironment($projectID: ID!, $environmentID: ID!) {
  deleteEnvironment(projectID: $projectID, environmentID: $environmentID)
}
"""

GET_ENVIRONMENT_QUERY = """
query getEnvironment($projectID: ID!, $environmentID: ID!) {
  getEnvironment(projectID: $projectID, environmentID: $environmentID) {
    environmentID
    projectID
    name
    description
    type
    tags
    infraIDs
    createdAt
    updatedAt
    createdBy { username }
    updatedBy { username }
  }
}
"""

LIST_ENVIRONMENTS_QUERY = """
query listEnvironments($projectID: ID!, $request: ListEnvironmentRequest) {
  listEnvironments(projectID: $projectID, request: $request) {
    totalNoOfEnvironments
    environments {
      environmentID
      projectID
      name
      description
      type
      tags
      infraIDs
      createdAt
      updatedAt
      createdBy { username }
      updatedBy { username }
    }
  }
}
"""

# ---------------------------------------------------------------------
# Experiments
# ---------------------------------------------------------------------

SAVE_EXPERIMENT_MUTATION = """
mutation saveChaosExperiment($projectID: ID!, $request: SaveChaosExperimentRequest!) {
  saveChaosExperiment(projectID: $projectID, request: $request)
}
"""

LIST_EXPERIMENTS_QUERY = """
query listExperiment($projectID: ID!, $request: ListExperimentRequest!) {
  listExperiment(projectID: $projectID, request: $request) {
    totalNoOfExperiments
    experiments {
      experimentID
      experimentManifest
      cronSyntax
      name
      description
      tags
      infra {
        name
        infraID
      }
      updatedBy {
        username
        email
      }
    }
  }
}
"""

LIST_EXPERIMENT_RUNS_QUERY = """
query listExperimentRuns($projectID: ID!, $request: ListExperimentRunRequest!) {
  listExperimentRun(projectID: $projectID, request: $request) {
    totalNoOfExperimentRuns
    experimentRuns {
      experimentRunID
      experimentID
      experimentName
      infra {
        name
      }
      updatedAt
      updatedBy {
        username
      }
      phase
      resiliencyScore
    }
  }
}
"""

DELETE_EXPERIMENT_MUTATION = """
mutation deleteChaosExperiment($projectID: ID!, $experimentID: String!, $experimentRunID: String) {
  deleteChaosExperiment(
    projectID: $projectID
    experimentID: $experimentID
    experimentRunID: $experimentRunID
  )
}
"""

RUN_EXPERIMENT_MUTATION = """
mutation runChaosExperiment($experimentID: String!, $projectID: ID!) {
  runChaosExperiment(experimentID: $experimentID, projectID: $projectID) {
    notifyID
  }
}
"""

GET_EXPERIMENT_RUN_QUERY = """
query getExperimentRun($projectID: ID!, $experimentRunID: ID) {
  getExperimentRun(projectID: $projectID, experimentRunID: $experimentRunID) {
    projectID
    experimentRunID
    experimentID
    experimentName
    phase
    resiliencyScore
    faultsPassed
    faultsFailed
    faultsAwaited
    faultsStopped
    faultsNa
    totalFaults
    updatedAt
    updatedBy {
      username
    }
  }
}
"""

GET_EXPERIMENT_STATUS_QUERY = """
query getExperiment($projectID: ID!, $experimentID: String!) {
  getExperiment(projectID: $projectID, experimentID: $experimentID) {
    experimentDetails {
      name
      experimentID
      recentExperimentRunDetails {
        experimentRunID
        phase
        resiliencyScore
        updatedAt
      }
    }
    averageResiliencyScore
  }
}
"""

# ---------------------------------------------------------------------
# Infrastructure
# ---------------------------------------------------------------------

LIST_INFRAS_QUERY = """
query listInfras($projectID: ID!, $request: ListInfraRequest!) {
  listInfras(projectID: $projectID, request: $request) {
    totalNoOfInfras
    infras {
      infraID
      name
      description
      environmentID
      platformName
      isActive
      isInfraConfirmed
      infraNamespace
      serviceAccount
      infraScope
      version
      startTime
      lastHeartbeat
      noOfExperiments
      noOfExperimentRuns
      tags
      createdAt
      updatedAt
      createdBy { username }
      updatedBy { username }
    }
  }
}
"""

REGISTER_INFRA_MUTATION = """
mutation registerInfra($projectID: ID!, $request: RegisterInfraRequest!) {
  registerInfra(projectID: $projectID, request: $request) {
    infraID
    name
    token
    manifest
  }
}
"""

DISCONNECT_INFRA_MUTATION = """
mutation deleteInfra($projectID: ID!, $infraID: String!) {
  deleteInfra(projectID: $projectID, infraID: $infraID)
}
"""

SERVER_VERSION_QUERY = """
query getServerVersion {
  getServerVersion {
    key
    value
  }
}
"""

# ---------------------------------------------------------------------
# Probes
# ---------------------------------------------------------------------

_PROBE_RUN_FIELDS = """
      probeTimeout
      interval
      retry
      attempt
      probePollingInterval
      initialDelay
      evaluationTimeout
      stopOnFailure"""

_PROBE_FIELDS = f"""
    name
    description
    type
    infrastructureType
    tags
    kubernetesHTTPProperties {{{_PROBE_RUN_FIELDS}
      url
      insecureSkipVerify
      method {{
        get {{
          responseCode
          criteria
        }}
        post {{
          body
          contentType
          responseCode
          criteria
        }}
      }}
    }}
    kubernetesCMDProperties {{{_PROBE_RUN_FIELDS}
      command
      comparator {{
        type
        criteria
        value
      }}
      source
    }}
    k8sProperties {{{_PROBE_RUN_FIELDS}
      group
      version
      resource
      namespace
    }}
    promProperties {{{_PROBE_RUN_FIELDS}
      endpoint
      query
    }}"""

LIST_PROBES_QUERY = """
query ListProbes($projectID: ID!, $probeNames: [ID!], $filter: ProbeFilterInput) {
  listProbes(projectID: $projectID, probeNames: $probeNames, filter: $filter) {
    name
    type
    createdAt
    createdBy {
      username
    }
  }
}
"""

GET_PROBE_QUERY = f"""
query getProbe($projectID: ID!, $probeName: ID!) {{
  getProbe(projectID: $projectID, probeName: $probeName) {{{_PROBE_FIELDS}
    createdAt
    createdBy {{
      username
    }}
    updatedAt
    updatedBy {{
      username
    }}
  }}
}}
"""

GET_PROBE_YAML_QUERY = """
query getProbeYAML($projectID: ID!, $request: GetProbeYAMLRequest!) {
  getProbeYAML(projectID: $projectID, request: $request)
}
"""

DELETE_PROBE_MUTATION = """
mutation deleteProbe($probeName: ID!, $projectID: ID!) {
  deleteProbe(probeName: $probeName, projectID: $projectID)
}
"""

ADD_PROBE_MUTATION = f"""
mutation addProbe($projectID: ID!, $request: ProbeRequest!) {{
  addProbe(projectID: $projectID, request: $request) {{{_PROBE_FIELDS}
  }}
}}
"""
