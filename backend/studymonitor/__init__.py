# SPDX-License-Identifier: Apache-2.0
"""Study monitor backend: analytics for research-study dashboards."""
