from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.stripe_payment_gateway import StripePaymentGateway
from src.app.services.payment_gateway import PaymentGateway

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session

def get_payment_gateway() -> PaymentGateway:
    return StripePaymentGateway(
        secret_key=ApplicationConfig.STRIPE_SECRET_KEY,
        api_base=ApplicationConfig.STRIPE_API_BASE,
        timeout=ApplicationConfig.PAYMENT_REQUEST_TIMEOUT,
    )
