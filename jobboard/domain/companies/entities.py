"""
Company entities referenced by job postings.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass
class Company:
    """Public company profile."""

    id: str
    company_name: str
    email: Optional[str] = None
    is_approved: bool = False
    active: bool = True
    registration_date: Optional[datetime] = None
    image_link: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Company":
        return cls(
            id=str(doc.get("_id")),
            company_name=doc.get("companyName") or "",
            email=doc.get("email"),
            is_approved=bool(doc.get("isApproved", False)),
            active=bool(doc.get("active", True)),
            registration_date=doc.get("registrationDate"),
            image_link=doc.get("imageLink"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.id,
            "companyName": self.company_name,
            "email": self.email,
            "isApproved": self.is_approved,
            "active": self.active,
            "registrationDate": self.registration_date,
            "imageLink": self.image_link,
        }
