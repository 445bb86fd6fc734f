"""Static NestJS + Sentry scaffolding guide."""

from ...core.types import ToolResult
from ..registry import registry

SENTRY_INTERCEPTOR = """\
src/interceptors/sentry.interceptor.ts:
```typescript
import {
  ExecutionContext,
  CallHandler,
  NestInterceptor,
  Injectable,
} from '@nestjs/common';
import * as Sentry from '@sentry/node';
import { Observable } from 'rxjs';
import { tap } from 'rxjs/operators';

@Injectable()
export class SentryInterceptor implements NestInterceptor {
  intercept(context: ExecutionContext, next: CallHandler): Observable<any> {
    return next.handle().pipe(
      tap({
        error: (exception) => {
          Sentry.captureException(exception);
        },
      }),
    );
  }
}
```"""

MAIN_TS = """\
src/main.ts:
```typescript
import { NestFactory } from '@nestjs/core';
import { AppModule } from './app.module';
import * as Sentry from '@sentry/node';
import { SentryInterceptor } from './interceptors/sentry.interceptor';

async function bootstrap() {
  // Initialize Sentry
  Sentry.init({
    dsn: process.env.SENTRY_DSN,
    // Set tracesSampleRate to 1.0 to capture 100% of transactions for performance monitoring
    tracesSampleRate: 1.0,
  });

  const app = await NestFactory.create(AppModule);
  app.useGlobalInterceptors(new SentryInterceptor());
  await app.listen(3000);
}
bootstrap();
```"""

APP_MODULE_TS = """\
src/app.module.ts:
```typescript
import { Module } from '@nestjs/common';
import { ConfigModule } from '@nestjs/config';
import { AppController } from './app.controller';
import { AppService } from './app.service';

@Module({
  imports: [
    ConfigModule.forRoot({
      isGlobal: true,
    }),
  ],
  controllers: [AppController],
  providers: [AppService],
})
export class AppModule {}
```"""

SCAFFOLD_STEPS: tuple[str, ...] = (
    "To scaffold a NestJS project with Sentry integration, follow these steps:",
    "1. Create the following files:\n\n" + SENTRY_INTERCEPTOR,
    MAIN_TS,
    APP_MODULE_TS,
    ".env:\n```\nSENTRY_DSN=your-sentry-dsn-here\n```",
    "2. Install dependencies in the NestJS root folder:\n"
    "```bash\nnpm install --save @nestjs/config @sentry/node dotenv\n```",
    "3. Replace the SENTRY_DSN value in .env with your actual Sentry DSN",
    "4. Start the application:\n```bash\nnpm run start:dev\n```",
)


@registry.tool("nestjs_sentry_scaffold")
def nestjs_sentry_scaffold(_: object) -> ToolResult:
    """Step-by-step guide for scaffolding a NestJS project with Sentry error tracking."""

    return ToolResult.blocks(SCAFFOLD_STEPS)
