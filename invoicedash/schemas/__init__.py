from invoicedash.schemas.invoices import InvoiceForm, InvoiceFormState, InvoiceFormValidator, ValidationResult

__all__ = ["InvoiceForm", "InvoiceFormState", "InvoiceFormValidator", "ValidationResult"]
