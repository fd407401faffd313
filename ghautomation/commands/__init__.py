# -
# #%L
# GitHub Automation
# %%
# Copyright (C) 2026 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

"""GitHub Commands

One module per GitHub resource. Every command resolves its target, builds a
RequestDescriptor and hands it to ghautomation.core; results come back as
parsed JSON decorated with convenience keys (RepositoryUrl, IssueNumber, ...)
unless pipeline support is disabled.
"""

from .common import resolve_repository_elements, split_repository_uri

__all__ = [
    "resolve_repository_elements",
    "split_repository_uri",
]
