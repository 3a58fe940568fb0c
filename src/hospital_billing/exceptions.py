"""
Billing Exceptions
Custom exception classes for the hospital billing engine
"""


class BillingError(Exception):
    """Base class for billing engine errors"""

    pass


class HospitalNotFound(BillingError):
    """Requested hospital is not in the hospital directory"""

    def __init__(self, hospital_id: str):
        self.hospital_id = hospital_id
        super().__init__(f"Hospital not found for ID: {hospital_id}")


class ServiceNotFound(BillingError):
    """An associated service id cannot be resolved in the service directory"""

    def __init__(self, service_id: str):
        self.service_id = service_id
        super().__init__(f"Service not found for ID: {service_id}")


class InvalidDateRange(BillingError):
    """End date is earlier than start date"""

    pass


class InvalidPricing(BillingError):
    """Service pricing is missing or does not match its price type"""

    pass


class InvalidCommissionPolicy(BillingError):
    """Commission value is negative, or a percentage above 100"""

    pass
