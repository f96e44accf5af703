"""Core domain types for tagged-logger.

(c) Mike Casale 2025.
Licensed under the MIT License.
See LICENSE file for details.
"""
